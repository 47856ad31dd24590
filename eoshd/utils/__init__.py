"""Encoding, validation and serialization helpers for eoshd."""
