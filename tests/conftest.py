"""Credentials from the RFC examples shared by the test modules."""

import pytest

from httpdigest import DigestValue, HashAlgorithm, PlainUsername, Qop


RFC2617_HEADER = (
    'Digest username="Mufasa",'
    'realm="testrealm@host.com",'
    'nonce="dcd98b7102dd2f0e8b11d0f600bfb0c093",'
    'uri="/dir/index.html",'
    "qop=auth,"
    "nc=00000001,"
    'cnonce="0a4f113b",'
    'response="6629fae49393a05397450978507c4ef1",'
    'opaque="5ccc069c403ebaf9f0171e9517f40e41"'
)

# "Jäsøn Doe" as UTF-8
RFC7616_USERNAME = b"J\xc3\xa4s\xc3\xb8n Doe"
RFC7616_USERHASH = "488869477bf257147b804c45308cd62ac4e25eb717b12b298c79e62dcea254ec"


def make_rfc2069(realm="testrealm@host.com"):
    # Response from the RFC 2069 errata, not the RFC text
    return DigestValue(
        username=PlainUsername("Mufasa"),
        realm=realm,
        nonce="dcd98b7102dd2f0e8b11d0f600bfb0c093",
        response="1949323746fe6a43ef61f9606e7febea",
        request_uri="/dir/index.html",
    )


def make_rfc2617(algorithm=HashAlgorithm.MD5):
    return DigestValue(
        username=PlainUsername("Mufasa"),
        realm="testrealm@host.com",
        nonce="dcd98b7102dd2f0e8b11d0f600bfb0c093",
        nonce_count=1,
        response="6629fae49393a05397450978507c4ef1",
        request_uri="/dir/index.html",
        algorithm=algorithm,
        qop=Qop.AUTH,
        client_nonce="0a4f113b",
        opaque="5ccc069c403ebaf9f0171e9517f40e41",
    )


def make_rfc7616(algorithm, response):
    # RFC 7616, Section 3.9.1
    return DigestValue(
        username=PlainUsername("Mufasa"),
        realm="http-auth@example.org",
        nonce="7ypf/xlj9XXwfDPEoM4URrv/xwf94BcCAzFZH4GiTo0v",
        nonce_count=1,
        response=response,
        request_uri="/dir/index.html",
        algorithm=algorithm,
        qop=Qop.AUTH,
        client_nonce="f2/wE4q74E6zIJEtWaHKaf5wv/H5QzzpXusqGemxURZJ",
        opaque="FQhe/qaU925kfnzjCev0ciny7QMkPqMAFRtzCUYo5tdS",
    )


def make_rfc7616_sha512_256(username=RFC7616_USERHASH, userhash=True):
    # RFC 7616, Section 3.9.2
    return DigestValue(
        username=PlainUsername(username),
        realm="api@example.org",
        nonce="5TsQWLVdgBdmrQ0XsxbDODV+57QdFR34I9HAbC/RVvkK",
        nonce_count=1,
        response="ae66e67d6b427bd3f120414a82e4acff38e8ecd9101d6c861229025f607a79dd",
        request_uri="/doe.json",
        algorithm=HashAlgorithm.SHA512_256,
        qop=Qop.AUTH,
        client_nonce="NTg6RKcb9boFIAS3KrFK9BGeh+iDa/sm6jUMp2wds69v",
        opaque="HRPCssKJSGjCrkzDg8OhwpzCiGPChXYjwrI2QmXDnsOS",
        userhash=userhash,
    )


@pytest.fixture
def rfc2069_digest():
    return make_rfc2069()


@pytest.fixture
def rfc2617_digest():
    return make_rfc2617()


@pytest.fixture
def rfc7616_userhash_digest():
    return make_rfc7616_sha512_256()


@pytest.fixture
def rfc2617_sess_digest():
    return make_rfc2617(HashAlgorithm.MD5_SESS)


@pytest.fixture
def rfc7616_md5_digest():
    return make_rfc7616(HashAlgorithm.MD5, "8ca523f5e9506fed4657c9700eebdbec")


@pytest.fixture
def rfc7616_sha256_digest():
    return make_rfc7616(
        HashAlgorithm.SHA256,
        "753927fa0e85d155564e2e272a28d1802ca10daf4496794697cf8db5856cb6c1",
    )


@pytest.fixture
def rfc7616_username():
    return RFC7616_USERNAME


@pytest.fixture
def rfc2617_header():
    return RFC2617_HEADER


@pytest.fixture
def rfc7616_userhash():
    return RFC7616_USERHASH
