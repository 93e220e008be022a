"""Gradio interface for uigen."""
