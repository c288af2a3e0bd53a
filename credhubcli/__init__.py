"""Commands for finding, reading, generating, exporting and deleting credentials and permissions on a CredHub server."""

__version__ = "0.1.0"