"""JSON API over the pricing and profile functions."""
