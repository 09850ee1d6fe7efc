"""Sanitization package.

One sanitizer per settings-field type.  Each sanitizer takes the raw value
submitted for a field and returns the cleaned value that is safe to store.

Most sanitizers follow the same contract::

    def sanitize(value: object) -> object:
        ...

``dropdown_pages``, ``rgba`` and ``color`` additionally take their external
collaborators (a page-status lookup, a color parser) as keyword arguments.
None of them raises on bad data: unparsable input degrades to a default.
Use :class:`customizer.sanitization.registry.Sanitizer` to dispatch by
operation name.
"""
