import json

from tablejson.extractors.html_table_extractor import HTMLTableExtractor
from tablejson.main import TableConverter, convert_table_to_json, convert_table_to_records

WELL_FORMED = """
<table>
  <thead><tr><th>Name</th><th>Role</th><th>Office</th></tr></thead>
  <tbody>
    <tr><td>Ana</td><td>Engineer</td><td>Lisbon</td></tr>
    <tr><td>Minh</td><td>Analyst</td><td>Hanoi</td></tr>
    <tr><td>Sam</td><td>Manager</td><td>Oslo</td></tr>
  </tbody>
</table>
"""


def test_well_formed_table(make_table):
    records = convert_table_to_records(make_table(WELL_FORMED))
    assert len(records) == 3
    assert all(list(record) == ["Name", "Role", "Office"] for record in records)
    assert records[1] == {"Name": "Minh", "Role": "Analyst", "Office": "Hanoi"}


def test_th_header_row_is_not_data(make_table):
    table = make_table("""
    <table>
      <tr><th>Code</th><th>Label</th></tr>
      <tr><td>PT</td><td>Portugal</td></tr>
    </table>
    """)
    assert convert_table_to_records(table) == [{"Code": "PT", "Label": "Portugal"}]


def test_td_header_row_is_not_data(make_table):
    table = make_table("""
    <table>
      <tr><td>Code</td><td>Label</td></tr>
      <tr><td>PT</td><td>Portugal</td></tr>
      <tr><td>VN</td><td>Vietnam</td></tr>
    </table>
    """)
    assert convert_table_to_records(table) == [
        {"Code": "PT", "Label": "Portugal"},
        {"Code": "VN", "Label": "Vietnam"},
    ]


def test_mismatched_rows_are_dropped_not_padded(make_table):
    table = make_table("""
    <table>
      <thead><tr><th>A</th><th>B</th><th>C</th></tr></thead>
      <tbody>
        <tr><td>1</td><td>2</td></tr>
        <tr><td>1</td><td>2</td><td>3</td></tr>
        <tr><td>1</td><td>2</td><td>3</td><td>4</td></tr>
      </tbody>
    </table>
    """)
    assert convert_table_to_records(table) == [{"A": "1", "B": "2", "C": "3"}]


def test_blank_cells_become_none(make_table):
    table = make_table("""
    <table>
      <thead><tr><th>A</th><th>B</th><th>C</th></tr></thead>
      <tbody><tr><td></td><td>   </td><td>&nbsp;x&nbsp;</td></tr></tbody>
    </table>
    """)
    assert convert_table_to_records(table) == [{"A": None, "B": None, "C": "x"}]


def test_synthesized_headers_keep_every_row(make_table):
    table = make_table("""
    <table>
      <thead></thead>
      <tbody>
        <tr><td>1</td><td>2</td><td>3</td></tr>
        <tr><td>4</td><td>5</td><td>6</td></tr>
      </tbody>
    </table>
    """)
    records = convert_table_to_records(table)
    assert records == [
        {"Column_1": "1", "Column_2": "2", "Column_3": "3"},
        {"Column_1": "4", "Column_2": "5", "Column_3": "6"},
    ]


def test_row_header_cells_are_not_counted(make_table):
    table = make_table("""
    <table>
      <thead><tr><th>Q1</th><th>Q2</th></tr></thead>
      <tbody><tr><th>Revenue</th><td>10</td><td>12</td></tr></tbody>
    </table>
    """)
    assert convert_table_to_records(table) == [{"Q1": "10", "Q2": "12"}]


def test_empty_table(make_table):
    table = make_table("<table></table>")
    assert convert_table_to_records(table) == []
    assert convert_table_to_json(table) == "[]"


def test_json_output(make_table):
    table = make_table("""
    <table>
      <thead><tr><th>Zeta</th><th>Alpha</th></tr></thead>
      <tbody><tr><td>São Paulo</td><td> </td></tr></tbody>
    </table>
    """)
    output = convert_table_to_json(table)
    assert output == '[\n  {\n    "Zeta": "São Paulo",\n    "Alpha": null\n  }\n]'
    assert json.loads(output) == [{"Zeta": "São Paulo", "Alpha": None}]


def test_conversion_is_idempotent(make_table):
    table = make_table(WELL_FORMED)
    converter = TableConverter()
    assert converter.convert(table) == converter.convert(table)


def test_convert_with_custom_indent(make_table):
    output = TableConverter().convert(make_table(WELL_FORMED), indent=4)
    assert output.startswith('[\n    {\n        "Name": "Ana"')


def test_to_json_ascii_escaping():
    records = [{"City": "Zürich"}]
    assert HTMLTableExtractor.to_json(records, indent=None, ensure_ascii=True) == '[{"City": "Z\\u00fcrich"}]'


def test_convert_compact_output(make_table):
    table = make_table("""
    <table>
      <tr><th>A</th><th>B</th></tr>
      <tr><td>1</td><td></td></tr>
    </table>
    """)
    assert TableConverter().convert(table, indent=None) == '[{"A": "1", "B": null}]'


def test_extract_table_returns_headers_and_records(make_table):
    table = make_table("""
    <table>
      <thead><tr><th>A</th><th>A</th></tr></thead>
      <tbody>
        <tr><td>1</td><td>2</td></tr>
        <tr><td>only one</td></tr>
      </tbody>
    </table>
    """)
    headers, records = TableConverter().extract_table(table)
    assert headers == ["A", "A_2"]
    assert records == [{"A": "1", "A_2": "2"}]
