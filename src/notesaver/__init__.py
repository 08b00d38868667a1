"""Keeps notes as plain text files in a single directory.

If you installed via ``pip``, run ``notesaver -h`` to get help.

To use the Python API, look at :class:`notesaver.api.NoteSaver`
"""
