"""Essence Search: ranked web results scraped from search-engine result pages."""
