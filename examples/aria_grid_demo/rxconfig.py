"""Reflex configuration for the accessible grid demo app."""

import reflex as rx

config = rx.Config(
    app_name="aria_grid_demo",
    plugins=[rx.plugins.SitemapPlugin()],
)
