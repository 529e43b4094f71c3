import sys

from playwright.sync_api import sync_playwright

from tablejson.main import convert_table_to_json


def extract_first_table(url):
    """Open the page, locate its first table and convert it to JSON

    The browser is owned here, by the caller: the converter only reads the
    table while the page is still open.
    """
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=True)
        try:
            page = browser.new_page()
            page.goto(url)
            page.wait_for_selector("table")

            table = page.query_selector("table")
            if table is None:
                return "[]"
            return convert_table_to_json(table)
        finally:
            browser.close()


def main():
    url = sys.argv[1] if len(sys.argv) > 1 else "https://en.wikipedia.org/wiki/List_of_chemical_elements"
    print(extract_first_table(url))


if __name__ == "__main__":
    main()
