"""Sample sentences and request helpers for server tests."""

from typing import Any

from fastapi.testclient import TestClient

GGA_VALID = "$GPGGA,034225.077,3356.4650,S,15124.5567,E,1,03,9.7,-25.0,M,21.0,M,,0000*51"
RMC_VALID = "$GPRMC,220516,A,5133.82,N,00042.24,W,173.8,231.8,130694,004.2,W*70"
GSA_VALID = "$GPGSA,A,3,22,19,18,27,14,03,,,,,,,3.1,2.0,2.4*36"
FOO_VALID = "$GPFOO,1,2,3.3,x,y,zz,*51"
FOO_BAD_CHECKSUM = "$GPFOO,1,2,3.3,x,y,zz,*52"


def post_sentences(client: TestClient, *sentences: str) -> list[dict[str, Any]]:
    response = client.post("/sentences", json={"sentences": list(sentences)})
    assert response.status_code == 200
    return response.json()["results"]
