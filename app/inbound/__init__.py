"""Inbound media resolution -- bounded download, typing, and storage of attachments."""
