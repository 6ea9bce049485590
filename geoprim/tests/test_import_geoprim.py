"""Smoke test that the flat public API imports cleanly."""


def test_import_geoprim_smoke():
    import geoprim
    assert hasattr(geoprim, 'LineString')
    assert hasattr(geoprim, 'Rect')
    assert hasattr(geoprim, 'WindingOrder')
    assert isinstance(geoprim.__version__, str)
