"""Core building blocks: settings, logging, security and the winners store."""
