"""Entrypoints layer - Delivery mechanisms.

This layer contains:
- Handlers: a framework-neutral request surface returning status + JSON body
- Bootstrap: builds settings, secrets and every component once at startup

Entrypoints translate external requests into use case calls
and format responses for the delivery mechanism.
"""
