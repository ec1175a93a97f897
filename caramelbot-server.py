#!/usr/bin/env python3
"""
CaramelBot server

Relays Slack events and slash commands to an LLM and posts the
answer back to Slack.
"""

import uvicorn

from caramelbot.adapters.web import create_app
from caramelbot.config import AppConfig

config = AppConfig.from_env()
app = create_app(config)


# ============================================
# Main entry point
# ============================================
if __name__ == "__main__":
    print("Starting CaramelBot server...")
    missing = config.missing()
    if missing:
        print(f"Missing configuration: {', '.join(missing)} (set them in .env)")
    print(f"CaramelBot server listening on port {config.port}")
    uvicorn.run(app, host="0.0.0.0", port=config.port, log_level="info")
