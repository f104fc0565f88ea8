"""
Tests for the per-document-type service operations.

Uses respx to mock httpx requests, no real server needed.
"""

import base64
import json

import httpx
import pytest
import respx

from veryfi import DEFAULT_CATEGORIES, AddLineItem, UpdateLineItem, ValidationError

API_URL = "https://api.veryfi.com/api/v8"
FILE_URL = "https://cdn.example.com/receipt.jpg"

SAMPLE_DOCUMENT = {"id": 125344108, "total": 34.5, "vendor": {"name": "Walgreens"}}


def _body(route) -> dict:
    return json.loads(route.calls[0].request.content)


# ===========================================================================
# Routing: every operation hits the right verb and path
# ===========================================================================

ROUTES = [
    ("get_any_documents", (), "GET", "/partner/any-documents/"),
    ("get_any_document", (5,), "GET", "/partner/any-documents/5/"),
    ("delete_any_document", (5,), "DELETE", "/partner/any-documents/5/"),
    ("process_any_document_url", (FILE_URL, None, "passport"), "POST", "/partner/any-documents/"),
    ("get_bank_statements", (), "GET", "/partner/bank-statements/"),
    ("get_bank_statement", (6,), "GET", "/partner/bank-statements/6/"),
    ("delete_bank_statement", (6,), "DELETE", "/partner/bank-statements/6/"),
    ("process_bank_statement_url", (FILE_URL,), "POST", "/partner/bank-statements/"),
    ("get_business_cards", (), "GET", "/partner/business-cards/"),
    ("get_business_card", (7,), "GET", "/partner/business-cards/7/"),
    ("delete_business_card", (7,), "DELETE", "/partner/business-cards/7/"),
    ("process_business_card_base64", ("card.png", "ZGF0YQ=="), "POST", "/partner/business-cards/"),
    ("get_checks", (), "GET", "/partner/checks/"),
    ("get_check", (8,), "GET", "/partner/checks/8/"),
    ("delete_check", (8,), "DELETE", "/partner/checks/8/"),
    ("process_check_url", (FILE_URL,), "POST", "/partner/checks/"),
    ("get_w2s", (), "GET", "/partner/w2s/"),
    ("get_w2", (9,), "GET", "/partner/w2s/9/"),
    ("delete_w2", (9,), "DELETE", "/partner/w2s/9/"),
    ("process_w2_url", (FILE_URL,), "POST", "/partner/w2s/"),
    ("get_w9s", (), "GET", "/partner/w9s/"),
    ("get_w9", (10,), "GET", "/partner/w9s/10/"),
    ("delete_w9", (10,), "DELETE", "/partner/w9s/10/"),
    ("process_w9_url", (FILE_URL,), "POST", "/partner/w9s/"),
    ("get_w8benes", (), "GET", "/partner/w-8ben-e/"),
    ("get_w8bene", (11,), "GET", "/partner/w-8ben-e/11/"),
    ("delete_w8bene", (11,), "DELETE", "/partner/w-8ben-e/11/"),
    ("process_w8bene_url", (FILE_URL,), "POST", "/partner/w-8ben-e/"),
    ("get_contracts", (), "GET", "/partner/contracts/"),
    ("get_contract", (12,), "GET", "/partner/contracts/12/"),
    ("delete_contract", (12,), "DELETE", "/partner/contracts/12/"),
    ("process_contract_url", (FILE_URL,), "POST", "/partner/contracts/"),
    ("classify_document_url", (FILE_URL,), "POST", "/partner/classify/"),
    ("split_document_url", (FILE_URL,), "POST", "/partner/documents-set/"),
    ("get_split_documents", (), "GET", "/partner/documents-set/"),
    ("get_split_document", (13,), "GET", "/partner/documents-set/13/"),
    ("get_documents", (), "GET", "/partner/documents/"),
    ("get_document", (14,), "GET", "/partner/documents/14/"),
    ("delete_document", (14,), "DELETE", "/partner/documents/14/"),
    ("get_line_items", (14,), "GET", "/partner/documents/14/line-items/"),
    ("get_line_item", (14, 3), "GET", "/partner/documents/14/line-items/3"),
    ("delete_line_items", (14,), "DELETE", "/partner/documents/14/line-items/"),
    ("delete_line_item", (14, 3), "DELETE", "/partner/documents/14/line-items/3"),
    ("replace_tags", (14, ["a"]), "PUT", "/partner/documents/14/"),
    ("add_tags", (14, ["a"]), "POST", "/partner/documents/14/tags/"),
    ("process_document", ("missing.jpg",), "POST", "/partner/documents/"),
    ("process_document_base64", ("r.png", "ZGF0YQ=="), "POST", "/partner/documents/"),
    ("process_document_url", (FILE_URL,), "POST", "/partner/documents/"),
    ("update_document", (14, {"notes": "n"}), "PUT", "/partner/documents/14/"),
    ("add_line_item", (14, AddLineItem(1, "Tea", 2.0)), "POST", "/partner/documents/14/line-items/"),
    ("update_line_item", (14, 3, UpdateLineItem(total=1.0)), "PUT", "/partner/documents/14/line-items/3"),
    ("process_any_document", ("missing.jpg", "passport"), "POST", "/partner/any-documents/"),
    ("process_any_document_base64", ("p.png", "ZGF0YQ==", "passport"), "POST", "/partner/any-documents/"),
    ("process_bank_statement", ("missing.pdf",), "POST", "/partner/bank-statements/"),
    ("process_bank_statement_base64", ("s.pdf", "UERG"), "POST", "/partner/bank-statements/"),
    ("process_business_card", ("missing.png",), "POST", "/partner/business-cards/"),
    ("process_business_card_url", (FILE_URL,), "POST", "/partner/business-cards/"),
    ("process_check", ("missing.jpg",), "POST", "/partner/checks/"),
    ("process_check_base64", ("c.jpg", "ZGF0YQ=="), "POST", "/partner/checks/"),
    ("process_w2", ("missing.pdf",), "POST", "/partner/w2s/"),
    ("process_w2_base64", ("w2.pdf", "UERG"), "POST", "/partner/w2s/"),
    ("process_w9", ("missing.pdf",), "POST", "/partner/w9s/"),
    ("process_w9_base64", ("w9.pdf", "UERG"), "POST", "/partner/w9s/"),
    ("process_w8bene", ("missing.pdf",), "POST", "/partner/w-8ben-e/"),
    ("process_w8bene_base64", ("w8.pdf", "UERG"), "POST", "/partner/w-8ben-e/"),
    ("process_contract", ("missing.pdf",), "POST", "/partner/contracts/"),
    ("process_contract_base64", ("k.pdf", "UERG"), "POST", "/partner/contracts/"),
    ("classify_document", ("missing.pdf",), "POST", "/partner/classify/"),
    ("classify_document_base64", ("d.pdf", "UERG"), "POST", "/partner/classify/"),
    ("split_document", ("missing.pdf",), "POST", "/partner/documents-set/"),
    ("split_document_base64", ("set.pdf", "UERG"), "POST", "/partner/documents-set/"),
]


class TestRouting:
    @pytest.mark.parametrize("method_name, args, verb, path", ROUTES)
    @respx.mock
    def test_operation_route(self, client, method_name, args, verb, path):
        route = respx.route(method=verb, url=f"{API_URL}{path}").mock(
            return_value=httpx.Response(200, text='{"ok": true}')
        )

        result = getattr(client, method_name)(*args)

        assert route.call_count == 1
        assert result == '{"ok": true}'

    @pytest.mark.parametrize("method_name, args, verb, path", ROUTES)
    @pytest.mark.asyncio
    @respx.mock
    async def test_async_operation_route(self, client, method_name, args, verb, path):
        route = respx.route(method=verb, url=f"{API_URL}{path}").mock(
            return_value=httpx.Response(200, text='{"ok": true}')
        )

        result = await getattr(client, f"{method_name}_async")(*args)

        assert route.call_count == 1
        assert result == '{"ok": true}'


# ===========================================================================
# Documents
# ===========================================================================


class TestDocuments:
    @respx.mock
    def test_get_document_returns_raw_body(self, client):
        route = respx.get(f"{API_URL}/partner/documents/125344108/").mock(
            return_value=httpx.Response(200, json=SAMPLE_DOCUMENT)
        )

        result = client.get_document(125344108)

        assert json.loads(result)["vendor"]["name"] == "Walgreens"
        assert route.calls[0].request.url.params["id"] == "125344108"

    @respx.mock
    def test_process_document_payload(self, client, receipt_file):
        route = respx.post(f"{API_URL}/partner/documents/").mock(return_value=httpx.Response(201, json=SAMPLE_DOCUMENT))

        client.process_document(receipt_file, categories=["Meals & Entertainment"], delete_after_processing=True)

        body = _body(route)
        encoded = base64.b64encode(b"fake image bytes").decode()
        assert body["file_name"] == "receipt.jpg"
        assert body["file_data"] == "data:image/jpg;base64," + encoded
        assert body["categories"] == ["Meals & Entertainment"]
        assert body["auto_delete"] is True

    @respx.mock
    def test_process_document_default_categories(self, client, receipt_file):
        route = respx.post(f"{API_URL}/partner/documents/").mock(return_value=httpx.Response(201, text="{}"))

        client.process_document(receipt_file, categories=[])

        assert _body(route)["categories"] == DEFAULT_CATEGORIES
        assert len(DEFAULT_CATEGORIES) == 15

    @respx.mock
    def test_process_document_parameters_override(self, client):
        route = respx.post(f"{API_URL}/partner/documents/").mock(return_value=httpx.Response(201, text="{}"))
        parameters = {"auto_delete": True, "tags": ["expenses"]}

        client.process_document_base64("r.png", "ZGF0YQ==", parameters=parameters)

        body = _body(route)
        assert body["auto_delete"] is True
        assert body["tags"] == ["expenses"]
        assert body["file_data"] == "ZGF0YQ=="
        assert parameters == {"auto_delete": True, "tags": ["expenses"]}

    @respx.mock
    def test_process_document_url_payload(self, client):
        route = respx.post(f"{API_URL}/partner/documents/").mock(return_value=httpx.Response(201, text="{}"))

        client.process_document_url(
            file_url=FILE_URL,
            max_pages_to_process=3,
            boost_mode=True,
            external_id="ext-1",
        )

        body = _body(route)
        assert body["file_url"] == FILE_URL
        assert "file_urls" not in body
        assert body["max_pages_to_process"] == 3
        assert body["boost_mode"] is True
        assert body["external_id"] == "ext-1"
        assert body["auto_delete"] is False
        assert body["categories"] == DEFAULT_CATEGORIES

    @respx.mock
    def test_list_merges_caller_parameters(self, client):
        route = respx.get(f"{API_URL}/partner/documents/").mock(return_value=httpx.Response(200, text="[]"))

        client.get_documents(page=3, confidence_details=True, parameters={"created_date__gt": "2024-01-01"})

        params = route.calls[0].request.url.params
        assert params["page"] == "3"
        assert params["page_size"] == "50"
        assert params["confidence_details"] == "true"
        assert params["created_date__gt"] == "2024-01-01"


# ===========================================================================
# Line items and tags
# ===========================================================================


class TestLineItems:
    @respx.mock
    def test_add_line_item(self, client):
        route = respx.post(f"{API_URL}/partner/documents/14/line-items/").mock(
            return_value=httpx.Response(201, text='{"id": 1}')
        )

        client.add_line_item(14, AddLineItem(1, "Coffee", 3.5, sku="C-1"))

        assert _body(route) == {"sku": "C-1", "order": 1, "description": "Coffee", "total": 3.5}

    @respx.mock
    def test_update_line_item(self, client):
        route = respx.put(f"{API_URL}/partner/documents/14/line-items/3").mock(
            return_value=httpx.Response(200, text="{}")
        )

        client.update_line_item(14, 3, UpdateLineItem(total=9.99))

        assert _body(route) == {"total": 9.99}

    @respx.mock(assert_all_called=False)
    def test_invalid_model_raises_before_request(self, client):
        route = respx.put(f"{API_URL}/partner/documents/14/line-items/3")

        with pytest.raises(ValidationError):
            client.update_line_item(14, 3, UpdateLineItem())
        assert not route.called


class TestTags:
    @respx.mock
    def test_replace_tags_body(self, client):
        route = respx.put(f"{API_URL}/partner/documents/14/").mock(return_value=httpx.Response(200, text="{}"))

        client.replace_tags(14, ["travel", "q3"])

        assert _body(route) == {"tags": ["travel", "q3"]}

    @respx.mock
    def test_add_tags_body(self, client):
        route = respx.post(f"{API_URL}/partner/documents/14/tags/").mock(return_value=httpx.Response(200, text="{}"))

        client.add_tags(14, ("urgent",))

        assert _body(route) == {"tags": ["urgent"]}


# ===========================================================================
# Other document types
# ===========================================================================


class TestDocumentTypes:
    @respx.mock
    def test_any_document_blueprint(self, client, receipt_file):
        route = respx.post(f"{API_URL}/partner/any-documents/").mock(return_value=httpx.Response(201, text="{}"))

        client.process_any_document(receipt_file, "passport", parameters={"external_id": "p-1"})

        body = _body(route)
        assert body["blueprint_name"] == "passport"
        assert body["file_name"] == "receipt.jpg"
        assert body["file_data"] == base64.b64encode(b"fake image bytes").decode()
        assert body["external_id"] == "p-1"

    @respx.mock
    def test_check_url_with_multiple_files(self, client):
        route = respx.post(f"{API_URL}/partner/checks/").mock(return_value=httpx.Response(201, text="{}"))
        urls = ["https://cdn.example.com/front.jpg", "https://cdn.example.com/back.jpg"]

        client.process_check_url(file_urls=urls)

        body = _body(route)
        assert body["file_url"] is None
        assert body["file_urls"] == urls

    @respx.mock
    def test_contract_listing_has_no_detail_flags(self, client):
        route = respx.get(f"{API_URL}/partner/contracts/").mock(return_value=httpx.Response(200, text="[]"))

        client.get_contracts(page=2, page_size=5)

        params = route.calls[0].request.url.params
        assert params["page"] == "2"
        assert "bounding_boxes" not in params
        assert "confidence_details" not in params

    @respx.mock
    def test_classify_file(self, client, receipt_file):
        route = respx.post(f"{API_URL}/partner/classify/").mock(
            return_value=httpx.Response(200, text='{"document_type": {"value": "receipt"}}')
        )

        result = client.classify_document(receipt_file, {"document_types": ["receipt", "invoice"]})

        assert json.loads(result)["document_type"]["value"] == "receipt"
        assert _body(route)["document_types"] == ["receipt", "invoice"]

    @respx.mock
    def test_split_document_file(self, client, receipt_file):
        route = respx.post(f"{API_URL}/partner/documents-set/").mock(return_value=httpx.Response(201, text="{}"))

        client.split_document(receipt_file)

        assert _body(route)["file_name"] == "receipt.jpg"

    @respx.mock
    def test_w8bene_base64(self, client):
        route = respx.post(f"{API_URL}/partner/w-8ben-e/").mock(return_value=httpx.Response(201, text="{}"))

        client.process_w8bene_base64("form.pdf", "UERG")

        assert _body(route) == {"file_name": "form.pdf", "file_data": "UERG"}
