""" Documentation vector search service... """
