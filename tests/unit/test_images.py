"""
Unit tests for product image resolution.
"""
import pytest
from marketplace_api.presentation.images import (
    PLACEHOLDER_IMAGE,
    get_product_image_url,
    resolve_main_image,
)


class TestResolveMainImage:

    def test_bare_name_goes_under_uploads(self):
        assert resolve_main_image(["foo.jpg"]) == "/uploads/products/foo.jpg"

    def test_uploads_path_unchanged(self):
        assert resolve_main_image(["/uploads/products/foo.jpg"]) == "/uploads/products/foo.jpg"
        assert resolve_main_image(["uploads/products/foo.jpg"]) == "uploads/products/foo.jpg"

    def test_leading_slashes_are_stripped(self):
        assert resolve_main_image(["//foo.jpg"]) == "/uploads/products/foo.jpg"

    def test_first_image_wins_over_legacy_image(self):
        assert resolve_main_image(["a.jpg", "b.jpg"], "legacy.jpg") == "/uploads/products/a.jpg"

    @pytest.mark.parametrize("images", [None, []])
    def test_legacy_image_used_when_list_empty(self, images):
        assert resolve_main_image(images, "legacy.jpg") == "/uploads/products/legacy.jpg"

    def test_no_images_yields_none(self):
        assert resolve_main_image(None, None) is None
        assert resolve_main_image([], "") is None

    def test_non_string_reference_passes_through(self):
        reference = {"url": "x"}
        assert resolve_main_image([reference]) is reference


class TestGetProductImageUrl:

    def test_none_gives_placeholder(self):
        assert get_product_image_url(None, "http://localhost:3001") == PLACEHOLDER_IMAGE

    def test_absolute_url_unchanged(self):
        url = "https://cdn.example.com/a.jpg"
        assert get_product_image_url(url, "http://localhost:3001") == url

    def test_joined_to_server_origin(self):
        assert (
            get_product_image_url("/uploads/products/a.jpg", "http://localhost:3001/")
            == "http://localhost:3001/uploads/products/a.jpg"
        )

    def test_relative_without_origin(self):
        assert get_product_image_url("uploads/a.jpg") == "/uploads/a.jpg"
