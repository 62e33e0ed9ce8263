"""Domain modules for neutree-catalog.

Each domain keeps its models, client operations and MCP tools together.
The huggingface domain converts hub repositories into catalog documents;
the catalog domain owns the document models and the catalog index.
"""
