"""Relay WhatsApp messages between the Cloud API, a completion API and a GraphQL message store."""

__version__ = "0.1.0"
