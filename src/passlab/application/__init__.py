"""Application layer – account registration and login use cases."""
