"""Tests for wc_tools/categories.py, tags.py and shipping_classes.py."""

import pytest


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------

class TestCategories:

    @pytest.mark.asyncio
    async def test_list_has_no_defaults(self, registry, mock_client):
        await registry.call("listProductCategories", {})

        mock_client.get.assert_awaited_once_with("/products/categories", {})

    @pytest.mark.asyncio
    async def test_create_with_image_src(self, registry, mock_client):
        await registry.call("createProductCategory", {
            "name": "Clothing",
            "display": "subcategories",
            "image": {"src": "https://img.example/c.jpg"},
        })

        mock_client.post.assert_awaited_once_with("/products/categories", {
            "name": "Clothing",
            "display": "subcategories",
            "image": {"src": "https://img.example/c.jpg"},
        })

    @pytest.mark.asyncio
    async def test_create_rejects_empty_image(self, registry, mock_client):
        text = (await registry.call("createProductCategory", {"name": "Clothing", "image": {}}))[0].text

        assert text.startswith("Error in createProductCategory: invalid input: image:")
        mock_client.post.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_rejects_empty_name(self, registry):
        text = (await registry.call("createProductCategory", {"name": ""}))[0].text

        assert text.startswith("Error in createProductCategory: invalid input: name:")

    @pytest.mark.asyncio
    async def test_get_update_delete(self, registry, mock_client):
        await registry.call("getProductCategory", {"categoryId": 9})
        await registry.call("updateProductCategory", {"categoryId": 9, "description": "All kinds"})
        await registry.call("deleteProductCategory", {"categoryId": 9})

        mock_client.get.assert_awaited_once_with("/products/categories/9")
        mock_client.put.assert_awaited_once_with("/products/categories/9", {"description": "All kinds"})
        mock_client.delete.assert_awaited_once_with("/products/categories/9", {"force": True})

    @pytest.mark.asyncio
    async def test_batch_update_items_use_id(self, registry, mock_client):
        await registry.call("batchProductCategories", {
            "update": [{"categoryId": 10, "description": "Nice hoodies"}],
            "delete": [11],
        })

        mock_client.post.assert_awaited_once_with("/products/categories/batch", {
            "update": [{"id": 10, "description": "Nice hoodies"}],
            "delete": [11],
        })


# ---------------------------------------------------------------------------
# Tags
# ---------------------------------------------------------------------------

class TestTags:

    @pytest.mark.asyncio
    async def test_list_with_filters(self, registry, mock_client):
        await registry.call("listProductTags", {"orderby": "count", "hide_empty": False})

        mock_client.get.assert_awaited_once_with("/products/tags", {"orderby": "count", "hide_empty": False})

    @pytest.mark.asyncio
    async def test_list_rejects_unknown_orderby(self, registry):
        text = (await registry.call("listProductTags", {"orderby": "popularity"}))[0].text

        assert text.startswith("Error in listProductTags: invalid input: orderby:")

    @pytest.mark.asyncio
    async def test_create(self, registry, mock_client):
        await registry.call("createProductTag", {"name": "Leather Shoes"})

        mock_client.post.assert_awaited_once_with("/products/tags", {"name": "Leather Shoes"})

    @pytest.mark.asyncio
    async def test_get_update_delete(self, registry, mock_client):
        await registry.call("getProductTag", {"tagId": 34})
        await registry.call("updateProductTag", {"tagId": 34, "slug": "leather"})
        await registry.call("deleteProductTag", {"tagId": 34})

        mock_client.get.assert_awaited_once_with("/products/tags/34")
        mock_client.put.assert_awaited_once_with("/products/tags/34", {"slug": "leather"})
        mock_client.delete.assert_awaited_once_with("/products/tags/34", {"force": True})

    @pytest.mark.asyncio
    async def test_batch(self, registry, mock_client):
        await registry.call("batchProductTags", {
            "create": [{"name": "Round toe"}],
            "update": [{"tagId": 34, "description": "Genuine leather."}],
        })

        mock_client.post.assert_awaited_once_with("/products/tags/batch", {
            "create": [{"name": "Round toe"}],
            "update": [{"id": 34, "description": "Genuine leather."}],
        })


# ---------------------------------------------------------------------------
# Shipping classes
# ---------------------------------------------------------------------------

class TestShippingClasses:

    @pytest.mark.asyncio
    async def test_list(self, registry, mock_client):
        await registry.call("listShippingClasses", {"per_page": 50})

        mock_client.get.assert_awaited_once_with("/products/shipping_classes", {"per_page": 50})

    @pytest.mark.asyncio
    async def test_create_requires_name(self, registry, mock_client):
        text = (await registry.call("createShippingClass", {"slug": "priority"}))[0].text

        assert text == "Error in createShippingClass: invalid input: name: Field required"
        mock_client.post.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_get_update_delete(self, registry, mock_client):
        await registry.call("getShippingClass", {"shippingClassId": 32})
        await registry.call("updateShippingClass", {"shippingClassId": 32, "description": "Express"})
        await registry.call("deleteShippingClass", {"shippingClassId": 32})

        mock_client.get.assert_awaited_once_with("/products/shipping_classes/32")
        mock_client.put.assert_awaited_once_with("/products/shipping_classes/32", {"description": "Express"})
        mock_client.delete.assert_awaited_once_with("/products/shipping_classes/32", {"force": True})

    @pytest.mark.asyncio
    async def test_batch(self, registry, mock_client):
        await registry.call("batchShippingClasses", {"update": [{"id": 33, "name": "Small"}], "delete": [32]})

        mock_client.post.assert_awaited_once_with(
            "/products/shipping_classes/batch", {"update": [{"id": 33, "name": "Small"}], "delete": [32]}
        )
