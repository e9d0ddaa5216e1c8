"""An ordered list of strings with a read cursor."""

_MAX_SAVED = 16


class StringList:
    """Strings read one after another through a cursor.

    Strings are cut at the first NUL character when added.
    """

    def __init__(self):
        self.reset()

    def reset(self):
        """Remove all strings and saved positions."""
        self._items = []
        self._pos = 0
        self._saved = []

    def add_string(self, s):
        """Append ``s``; None is stored as an empty string."""
        if s is None:
            s = ""
        self._items.append(s.split("\0", 1)[0])

    def get_string(self):
        """Return the string at the cursor and advance, or None at the end."""
        if self._pos >= len(self._items):
            return None
        value = self._items[self._pos]
        self._pos += 1
        return value

    def get_string_at(self, index):
        """Return the string with number ``index``, leaving the cursor alone.

        Returns None if there is no such string.
        """
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def rewind(self):
        """Move the cursor back to the first string."""
        self._pos = 0

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(list(self._items))

    def char_count(self):
        """Stored characters, counting one terminator per string."""
        return sum(len(s) + 1 for s in self._items)

    def search(self, s, case_sensitive=True):
        """True if ``s`` is in the list."""
        if case_sensitive:
            return s in self._items
        folded = s.lower()
        return any(item.lower() == folded for item in self._items)

    def save_position(self):
        """Push the cursor; at most 16 positions are kept, more are ignored."""
        if len(self._saved) < _MAX_SAVED:
            self._saved.append(self._pos)

    def restore_position(self):
        """Pop the last saved cursor, if there is one."""
        if self._saved:
            self._pos = self._saved.pop()