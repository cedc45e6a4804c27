"""Google Docs Parser.

Downloads a Google Docs document as DOCX, converts it to HTML with mammoth,
and extracts labeled field values for a caller-supplied list of keywords.
"""
