"""
onedata.generation

Text-generation collaborator package.

Responsibilities:
- Define the generator interface used by the conversion service.
- Provide HTTP clients for hosted/local generation APIs.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The conversion service depends on `TextGenerator` only, never on a concrete provider.
