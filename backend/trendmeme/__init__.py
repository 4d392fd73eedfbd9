"""Trend Meme Backend: trending topics in, captioned memegen memes out."""
