"""DOM passes over BeautifulSoup trees used by the cleaning pipeline."""
