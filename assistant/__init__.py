"""Chat assistant proxy for the Motofull storefront."""
