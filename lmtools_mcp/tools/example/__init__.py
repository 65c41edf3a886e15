"""Example tools demonstrating the provider pattern."""
