from credhubcli.api import (
    INSECURE_HTTP_WARNING,
    SKIP_TLS_DEPRECATION,
    UNVERIFIED_TLS_WARNING,
    read_or_get_ca_certs,
    warnings_for,
)


def test_http_warns_insecure():
    assert warnings_for("http://example.com", False) == [INSECURE_HTTP_WARNING]
    assert INSECURE_HTTP_WARNING.startswith("Warning: Insecure HTTP API detected.")


def test_http_with_skip_tls_still_only_insecure():
    assert warnings_for("http://example.com", True) == [INSECURE_HTTP_WARNING]


def test_https_without_skip_has_no_warnings():
    assert warnings_for("https://example.com", False) == []


def test_https_with_skip_warns_and_deprecates():
    assert warnings_for("https://example.com:8844", True) == [
        UNVERIFIED_TLS_WARNING,
        SKIP_TLS_DEPRECATION,
    ]
    assert "--skip-tls-validation" in SKIP_TLS_DEPRECATION


def test_uppercase_scheme_is_https():
    assert warnings_for("HTTPS://example.com", False) == []


def test_read_ca_cert_from_file(tmp_path):
    cert_file = tmp_path / "ca.pem"
    cert_file.write_text("-----BEGIN CERTIFICATE-----\nabc\n")
    assert read_or_get_ca_certs([str(cert_file)]) == [
        "-----BEGIN CERTIFICATE-----\nabc\n"
    ]


def test_literal_ca_cert_is_kept(tmp_path):
    literal = "-----BEGIN CERTIFICATE-----\nliteral\n-----END CERTIFICATE-----"
    cert_file = tmp_path / "other.pem"
    cert_file.write_text("from-file")
    assert read_or_get_ca_certs([literal, str(cert_file)]) == [literal, "from-file"]


def test_no_ca_certs():
    assert read_or_get_ca_certs([]) == []