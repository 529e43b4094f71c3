import json
import os

import requests
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Get API URL from environment variable or use default
API_URL = os.getenv("API_URL", "http://localhost:8000")

SAMPLE_HTML = """
<table id="staff">
  <thead><tr><th>Name</th><th>Role</th><th>Office</th></tr></thead>
  <tbody>
    <tr><td>Ana</td><td>Engineer</td><td>Lisbon</td></tr>
    <tr><td>Minh</td><td>Analyst</td><td> </td></tr>
    <tr><td>Incomplete row</td></tr>
  </tbody>
</table>
"""


def get_backends():
    """List the element backends known to the API"""
    response = requests.get(f"{API_URL}/backends")
    response.raise_for_status()
    return response.json()


def convert_table(html, selector="table", table_index=0):
    """Convert a table from an HTML document using the API"""
    url = f"{API_URL}/convert-table"
    payload = {
        "html": html,
        "selector": selector,
        "table_index": table_index
    }

    response = requests.post(url, json=payload)
    response.raise_for_status()
    return response.json()


def convert_table_json(html, selector="table", table_index=0):
    """Convert a table and get back the serialized JSON text"""
    url = f"{API_URL}/convert-table/json"
    payload = {
        "html": html,
        "selector": selector,
        "table_index": table_index
    }

    response = requests.post(url, json=payload)
    response.raise_for_status()
    return response.text


def main():
    # Example 1: List backends
    print("Example 1: List backends")
    try:
        print(json.dumps(get_backends(), indent=2))
    except Exception as e:
        print(f"Error listing backends: {e}")

    # Example 2: Convert a table to records
    print("\nExample 2: Convert a table to records")
    try:
        result = convert_table(SAMPLE_HTML, selector="#staff")
        print(f"Headers: {result['headers']}")
        print(json.dumps(result["data"], indent=2, ensure_ascii=False))
    except Exception as e:
        print(f"Error converting table: {e}")

    # Example 3: Get the raw JSON text
    print("\nExample 3: Get the raw JSON text")
    try:
        print(convert_table_json(SAMPLE_HTML))
    except Exception as e:
        print(f"Error converting table: {e}")


if __name__ == "__main__":
    main()
