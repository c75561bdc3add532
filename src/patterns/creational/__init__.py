"""Creational patterns: abstract factory, factory method and singleton."""
