"""Adapters: libc description sources and output formats."""
