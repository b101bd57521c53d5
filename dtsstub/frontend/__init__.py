"""Reader for serialized front-end declaration documents"""
