"""Basic package tests to verify installation."""


def test_package_imports() -> None:
    """Verify the main package can be imported."""
    import adopters

    assert adopters.__version__


def test_public_api() -> None:
    """Verify the loader entry point and error types are exported."""
    from adopters import (
        AdoptersContent,
        ConfigurationError,
        DuplicateError,
        SchemaError,
        load_adopters,
    )

    assert callable(load_adopters)
    assert AdoptersContent is not None
    assert issubclass(SchemaError, ValueError)
    assert issubclass(DuplicateError, ValueError)
    assert not issubclass(ConfigurationError, ValueError)


def test_schemas_module_imports() -> None:
    """Verify schemas module structure is correct."""
    from adopters.schemas import (
        Adopter,
        AdoptersContent,
        AdoptionStatus,
        Category,
        UnverifiedAdopter,
    )

    assert Adopter is not None
    assert AdoptersContent is not None
    assert AdoptionStatus is not None
    assert Category is not None
    assert UnverifiedAdopter is not None
