"""
Adapters behind the domain ports: SQLAlchemy repositories, the Alpaca
brokerage client, the OpenAI-compatible chat client and its prompts.
"""
