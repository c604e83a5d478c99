"""
Telegram bot that purges the Cloudflare cache on confirmed chat requests.
"""

__version__ = "0.1.0"
