"""Tests for wc_tools/attributes.py and wc_tools/attribute_terms.py."""

import pytest


class TestAttributes:

    @pytest.mark.asyncio
    async def test_list_defaults(self, registry, mock_client):
        await registry.call("listProductAttributes", {})

        mock_client.get.assert_awaited_once_with(
            "/products/attributes", {"page": 1, "per_page": 10, "context": "view"}
        )

    @pytest.mark.asyncio
    async def test_get(self, registry, mock_client):
        await registry.call("getProductAttribute", {"attributeId": 1})

        mock_client.get.assert_awaited_once_with("/products/attributes/1")

    @pytest.mark.asyncio
    async def test_create(self, registry, mock_client):
        await registry.call("createProductAttribute", {"name": "Color", "order_by": "menu_order", "has_archives": True})

        mock_client.post.assert_awaited_once_with(
            "/products/attributes", {"name": "Color", "order_by": "menu_order", "has_archives": True}
        )

    @pytest.mark.asyncio
    async def test_create_rejects_unknown_order_by(self, registry, mock_client):
        text = (await registry.call("createProductAttribute", {"name": "Color", "order_by": "random"}))[0].text

        assert text.startswith("Error in createProductAttribute: invalid input: order_by:")

    @pytest.mark.asyncio
    async def test_create_requires_name(self, registry):
        text = (await registry.call("createProductAttribute", {}))[0].text

        assert text == "Error in createProductAttribute: invalid input: name: Field required"

    @pytest.mark.asyncio
    async def test_update(self, registry, mock_client):
        await registry.call("updateProductAttribute", {"attributeId": 1, "order_by": "name"})

        mock_client.put.assert_awaited_once_with("/products/attributes/1", {"order_by": "name"})

    @pytest.mark.asyncio
    async def test_delete(self, registry, mock_client):
        await registry.call("deleteProductAttribute", {"attributeId": 1, "force": False})

        mock_client.delete.assert_awaited_once_with("/products/attributes/1", {"force": False})

    @pytest.mark.asyncio
    async def test_batch_maps_attribute_id_to_id(self, registry, mock_client):
        await registry.call("batchProductAttributes", {
            "create": [{"name": "Brand"}],
            "update": [{"attributeId": 2, "order_by": "name"}, {"id": 3, "name": "Size"}],
        })

        mock_client.post.assert_awaited_once_with("/products/attributes/batch", {
            "create": [{"name": "Brand"}],
            "update": [{"id": 2, "order_by": "name"}, {"id": 3, "name": "Size"}],
        })


class TestAttributeTerms:

    @pytest.mark.asyncio
    async def test_list_sends_only_given_filters(self, registry, mock_client):
        await registry.call("listProductAttributeTerms", {"attributeId": 2, "hide_empty": True, "include": [4, 5]})

        mock_client.get.assert_awaited_once_with(
            "/products/attributes/2/terms", {"hide_empty": True, "include": [4, 5]}
        )

    @pytest.mark.asyncio
    async def test_get_requires_both_ids(self, registry, mock_client):
        text = (await registry.call("getProductAttributeTerm", {"attributeId": 2}))[0].text

        assert "termId" in text
        mock_client.get.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_get(self, registry, mock_client):
        await registry.call("getProductAttributeTerm", {"attributeId": 2, "termId": 23})

        mock_client.get.assert_awaited_once_with("/products/attributes/2/terms/23")

    @pytest.mark.asyncio
    async def test_create(self, registry, mock_client):
        await registry.call("createProductAttributeTerm", {"attributeId": 2, "name": "XXS"})

        mock_client.post.assert_awaited_once_with("/products/attributes/2/terms", {"name": "XXS"})

    @pytest.mark.asyncio
    async def test_update(self, registry, mock_client):
        await registry.call("updateProductAttributeTerm", {"attributeId": 2, "termId": 23, "menu_order": 3})

        mock_client.put.assert_awaited_once_with("/products/attributes/2/terms/23", {"menu_order": 3})

    @pytest.mark.asyncio
    async def test_delete(self, registry, mock_client):
        await registry.call("deleteProductAttributeTerm", {"attributeId": 2, "termId": 23})

        mock_client.delete.assert_awaited_once_with("/products/attributes/2/terms/23", {"force": True})

    @pytest.mark.asyncio
    async def test_batch_strips_attribute_id(self, registry, mock_client):
        await registry.call("batchProductAttributeTerms", {
            "attributeId": 2,
            "create": [{"attributeId": 2, "name": "XXS"}],
            "update": [{"attributeId": 2, "termId": 19, "menu_order": 6}],
        })

        mock_client.post.assert_awaited_once_with("/products/attributes/2/terms/batch", {
            "create": [{"name": "XXS"}],
            "update": [{"id": 19, "menu_order": 6}],
        })

    @pytest.mark.asyncio
    async def test_batch_strips_snake_case_attribute_id(self, registry, mock_client):
        await registry.call("batchProductAttributeTerms", {
            "attributeId": 2,
            "create": [{"attribute_id": 2, "name": "XS"}],
            "update": [{"attribute_id": 2, "term_id": 19, "name": "S"}],
        })

        mock_client.post.assert_awaited_once_with("/products/attributes/2/terms/batch", {
            "create": [{"name": "XS"}],
            "update": [{"id": 19, "name": "S"}],
        })
