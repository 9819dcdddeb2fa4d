"""Presentation helpers: terminal folds turning Results into output."""
