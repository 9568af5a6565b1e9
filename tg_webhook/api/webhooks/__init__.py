"""Inbound webhook endpoints."""
