# taxonomy/errors.py


class SlugSanitizerError(Exception):
    """Базовая ошибка пересчёта слагов."""


class NoTaxonomiesFound(SlugSanitizerError):
    """После исключения служебных таксономий обрабатывать нечего."""

    def __init__(self, message="No taxonomies left to process"):
        super().__init__(message)


class TermStoreError(SlugSanitizerError):
    """Хранилище терминов не смогло прочитать или записать данные."""

    def __init__(self, message, *, taxonomy=None, term_id=None):
        super().__init__(message)
        self.taxonomy = taxonomy
        self.term_id = term_id
