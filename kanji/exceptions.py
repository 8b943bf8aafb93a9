# kanji/exceptions.py
"""
Exceptions raised by kanji.services.
"""


class KanjiError(Exception):
    """Base exception for kanji persistence"""
    pass


class KanjiInsertError(KanjiError):
    """
    The INSERT failed. The transaction has been rolled back.
    """
    def __init__(self, kanji_char):
        self.kanji_char = kanji_char
        super().__init__(f"failed to insert kanji {kanji_char!r}")


class KanjiCommitError(KanjiError):
    """
    The row was inserted but the transaction could not be committed.
    """
    def __init__(self, kanji_char):
        self.kanji_char = kanji_char
        super().__init__(f"failed to commit transaction for kanji {kanji_char!r}")
