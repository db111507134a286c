"""Tests for the HTML calculator pages."""


class TestCalculatorForm:
    def test_unauthorized_page(self, anonymous_client):
        resp = anonymous_client.get("/")
        assert resp.status_code == 401
        assert "Acceso no autorizado" in resp.text
        assert "Calcular" not in resp.text

    def test_form_defaults(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert "Calculadora de Precios" in resp.text
        assert "ana@example.com" in resp.text
        assert 'name="quantity" id="quantity" min="1" placeholder="1" value="1"' in resp.text
        assert '<option value="none" selected>Sin IVA</option>' in resp.text
        assert "Resultados" not in resp.text


class TestCalculatorSubmit:
    def test_result_rendered(self, client):
        resp = client.post("/calculate", data={
            "amount": "200", "quantity": "2", "margin": "50", "tax_rate": "22",
        })
        assert resp.status_code == 200
        assert "Resultados" in resp.text
        assert "IVA (22%)" in resp.text
        assert "$244" in resp.text
        assert '<option value="22" selected>' in resp.text
        assert 'value="200"' in resp.text

    def test_none_tax_heading(self, client):
        resp = client.post("/calculate", data={
            "amount": "100", "quantity": "1", "margin": "20", "tax_rate": "none",
        })
        assert "IVA (0%)" in resp.text
        assert "$125" in resp.text

    def test_error_rendered_without_result(self, client):
        resp = client.post("/calculate", data={
            "amount": "50", "quantity": "1", "margin": "0", "tax_rate": "none",
        })
        assert resp.status_code == 200
        assert "El margen debe estar entre 0% y 100% (exclusivo)" in resp.text
        assert "Resultados" not in resp.text

    def test_empty_submission(self, client):
        resp = client.post("/calculate", data={"amount": "", "quantity": "", "margin": ""})
        assert "El importe debe ser mayor que 0" in resp.text

    def test_submitted_values_cleaned(self, client):
        resp = client.post("/calculate", data={
            "amount": "100.999", "quantity": "1", "margin": "20.555", "tax_rate": "none",
        })
        assert 'value="100.99"' in resp.text
        assert 'value="20.55"' in resp.text

    def test_requires_user(self, anonymous_client):
        resp = anonymous_client.post("/calculate", data={
            "amount": "100", "quantity": "1", "margin": "20",
        })
        assert resp.status_code == 401
        assert "Resultados" not in resp.text
