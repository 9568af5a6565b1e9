"""Test suite for the webhook service."""
