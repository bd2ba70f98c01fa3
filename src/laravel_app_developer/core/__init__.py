"""Core logic: feature matching, scoring, market research, plans and system designs.

This module is framework-agnostic. It has no dependency on MCP or FastMCP;
the server and the CLI both import from here.
"""
