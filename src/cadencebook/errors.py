class CadencebookError(Exception):
    pass


class ConfigError(CadencebookError):
    pass


class InvalidSlugError(CadencebookError):
    pass


class MissingFileError(CadencebookError):
    pass


class CatalogError(CadencebookError):
    pass


class UnknownRecipeError(CatalogError):
    pass


class DuplicateRecipeError(CatalogError):
    pass
