import sys

from selenium import webdriver
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.common.by import By

from tablejson.main import TableConverter


def main():
    url = sys.argv[1] if len(sys.argv) > 1 else "https://en.wikipedia.org/wiki/List_of_chemical_elements"

    options = Options()
    options.add_argument("--headless=new")
    driver = webdriver.Chrome(options=options)
    try:
        driver.get(url)
        table = driver.find_element(By.TAG_NAME, "table")

        converter = TableConverter(backend="selenium")
        headers, skip_first_row = converter.get_headers(table)
        print(f"Headers: {headers} (first row used as header: {skip_first_row})")
        print(converter.convert(table))
    finally:
        driver.quit()


if __name__ == "__main__":
    main()
