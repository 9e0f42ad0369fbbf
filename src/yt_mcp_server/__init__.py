"""
yt-mcp-server - YouTube Data API tools and resources over MCP.
"""

__version__ = "1.0.0"
