"""Vue single-file component patching.

Provides:
- patcher: patch_source, patch_component, patch_components
"""
