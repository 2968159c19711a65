import os
import sys

import requests

sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from library_catalog.core.security import create_access_token

BASE_URL = os.environ.get("CATALOG_BASE_URL", "http://localhost:8082")

librarian = {"Authorization": f"Bearer {create_access_token('smoke-librarian', ['LIBRARIAN'])}"}
reader = {"Authorization": f"Bearer {create_access_token('smoke-user', ['USER'])}"}


def check(label, response, expected_status):
    if response.status_code == expected_status:
        print(f"[SUCCESS] {label}: {response.status_code} {response.text[:120]}")
        return True
    print(f"[FAILED] {label}: expected {expected_status}, got {response.status_code} {response.text[:120]}")
    return False


def run():
    results = []
    try:
        results.append(check("Get LIB001", requests.get(f"{BASE_URL}/libros/LIB001", headers=reader), 200))
        results.append(check("Get unknown", requests.get(f"{BASE_URL}/libros/NOPE", headers=reader), 404))
        results.append(check("Search", requests.get(f"{BASE_URL}/libros/buscar", params={"criterio": "García Márquez"}, headers=reader), 200))
        results.append(check("Blank search", requests.get(f"{BASE_URL}/libros/buscar", params={"criterio": "   "}, headers=reader), 400))
        results.append(check("User cannot update", requests.put(f"{BASE_URL}/libros/LIB001/disponibilidad", json=False, headers=reader), 403))
        results.append(check("Librarian update", requests.put(f"{BASE_URL}/libros/LIB001/disponibilidad", json=False, headers=librarian), 200))
        results.append(check("Availability", requests.get(f"{BASE_URL}/libros/LIB001/disponible", headers=reader), 200))
        results.append(check("Restore", requests.put(f"{BASE_URL}/libros/LIB001/disponibilidad", json=True, headers=librarian), 200))
        results.append(check("No token", requests.get(f"{BASE_URL}/libros/LIB001"), 401))
    except requests.RequestException as e:
        print(f"[ERROR] Connection failed: {e}")
        return 1

    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(run())
