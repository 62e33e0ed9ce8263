"""neutree-catalog: Hugging Face to Neutree ModelCatalog tooling."""

__version__ = "0.1.0"
