"""Tree-sitter based TypeScript parsing and route extraction.

Provides:
- core: parse_file, parse_source, node_text, string_literal_value
- routes: extract_routes, extract_routes_from_file
"""
