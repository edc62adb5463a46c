"""Outer surfaces over the gateway: the intention analyzer, the HTTP service, and the CLI."""
