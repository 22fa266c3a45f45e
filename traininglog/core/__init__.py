"""Core configuration and cross-cutting helpers."""
