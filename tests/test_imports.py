def test_imports():
    import importlib

    # pydantic / bs4 / prefect are the stack every module leans on
    import bs4
    import prefect
    import pydantic

    assert getattr(pydantic, "VERSION", None)
    assert getattr(bs4, "__version__", None)
    assert getattr(prefect, "__version__", None)

    for name in (
        "hunter_data.accessor",
        "hunter_data.core.assembler",
        "hunter_data.core.scraping",
        "hunter_data.flows.hunter_data_flow",
        "hunter_data.scrapers",
    ):
        assert importlib.import_module(name) is not None
