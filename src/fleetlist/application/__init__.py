"""Application layer – query building, business filters, listing pipeline."""
