"""Entry points driving the use cases."""
