"""Command-line interface for erb-lint"""
