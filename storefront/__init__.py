"""Storefront backend: catalog browsing, product reviews and a gated admin area."""
