import pytest

from breadpy.catalog import (
    CatalogEntry,
    CatalogKind,
    Signature,
    SymbolCatalog,
    default_catalog,
    lookup,
)


def test_default_catalog_is_built_once_and_shared() -> None:
    assert default_catalog() is default_catalog()


def test_default_catalog_groups_in_declaration_order() -> None:
    catalog = default_catalog()
    kinds = [entry.kind for entry in catalog.entries()]

    assert len(catalog) == 30
    assert kinds[:15] == [CatalogKind.KEYWORD] * 15
    assert kinds[15:20] == [CatalogKind.TYPE] * 5
    assert kinds[20:29] == [CatalogKind.BUILTIN_FUNCTION] * 9
    assert kinds[29:] == [CatalogKind.PROPERTY]


def test_lookup_is_exact_and_case_sensitive() -> None:
    entry = lookup("len")

    assert entry is not None
    assert entry.documentation == "Built-in function to get length of collections"
    assert entry.signature == Signature("len(collection) -> Int", "Get the length of a string, array, or dictionary")
    assert lookup("Len") is None
    assert lookup("le") is None
    assert lookup("int") is not None
    assert lookup("Int") is not None
    assert lookup("Int") is not lookup("int")


def test_only_call_style_builtins_carry_signatures() -> None:
    names = [entry.name for entry in default_catalog().callables()]

    assert names == ["print", "len", "type", "str", "int", "float", "range"]
    append = lookup("append")
    assert append is not None
    assert append.kind == CatalogKind.BUILTIN_FUNCTION
    assert append.signature is None


def test_catalog_rejects_duplicate_names() -> None:
    entry = CatalogEntry(name="let", kind=CatalogKind.KEYWORD, documentation="x", detail="x")

    with pytest.raises(ValueError, match="Duplicate"):
        SymbolCatalog([entry, entry])


def test_signature_is_only_allowed_on_builtin_functions() -> None:
    with pytest.raises(ValueError, match="cannot carry a signature"):
        CatalogEntry(
            name="Int",
            kind=CatalogKind.TYPE,
            documentation="x",
            detail="x",
            signature=Signature("Int()", "x"),
        )


def test_catalog_has_no_mutation_api() -> None:
    catalog = default_catalog()

    with pytest.raises(TypeError):
        catalog._entries["new"] = catalog.entries()[0]  # type: ignore[index]
