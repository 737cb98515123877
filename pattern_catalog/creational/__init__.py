"""Creational design pattern examples: builder, factory and singleton."""
