# -*- coding: utf-8 -*-
"""
The Utilities Package for SketchAuth.

- blob_store: key-value persistence used by the template store.
- clipboard_manager: copies exported templates to and from the clipboard.
"""
