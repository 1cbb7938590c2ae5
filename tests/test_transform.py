from twcompany.etl import transform


def test_format_capital_groups_thousands():
    assert transform.format_capital(259303804580) == "NT$ 259,303,804,580"
    assert transform.format_capital("1000000") == "NT$ 1,000,000"
    assert transform.format_capital("2,500,000") == "NT$ 2,500,000"
    assert transform.format_capital(1500.0) == "NT$ 1,500"


def test_format_capital_absent_values_render_empty():
    for value in (None, "", "  ", 0, "0", "abc", float("nan"), True):
        assert transform.format_capital(value) == ""


def test_first_of_skips_empty_values():
    raw = {"a": "", "b": None, "c": "  value ", "d": "other"}
    assert transform.first_of(raw, "a", "b", "c", "d") == "value"
    assert transform.first_of(raw, "missing", default="fallback") == "fallback"


def test_from_gcis_maps_fields():
    raw = {
        "Business_Accounting_NO": "22099131",
        "Company_Name": "台灣積體電路製造股份有限公司",
        "Company_Status_Desc": "核准設立",
        "Paid_In_Capital_Amount": "259303804580",
        "Responsible_Name": "魏哲家",
        "Company_Location": "新竹科學園區新竹市力行六路8號",
        "Register_Organization_Desc": "國家科學及技術委員會新竹科學園區管理局",
        "Company_Setup_Date": "0760221",
        "Cmp_Business": [
            {"Business_Seq_NO": "0001", "Business_Item": "CC01080", "Business_Item_Desc": "電子零組件製造業"},
            {"Business_Seq_NO": "0002", "Business_Item": "F401010"},
        ],
    }

    record = transform.from_gcis(raw)

    assert record.registration_id == "22099131"
    assert record.name == "台灣積體電路製造股份有限公司"
    assert record.capital == "NT$ 259,303,804,580"
    assert record.representative == "魏哲家"
    assert record.registered_address == "國家科學及技術委員會新竹科學園區管理局"
    assert record.founded == "0760221"
    assert record.business_items == "電子零組件製造業、F401010"
    assert record.source == transform.SOURCE_GCIS


def test_from_gcis_prefers_stock_amount_and_defaults_status():
    record = transform.from_gcis(
        {"Company_Name": "Acme", "Capital_Stock_Amount": 5000, "Paid_In_Capital_Amount": 100}
    )
    assert record.capital == "NT$ 5,000"
    assert record.status == transform.STATUS_APPROVED
    assert record.business_items == ""


def test_from_g0v_maps_chinese_keys():
    record = transform.from_g0v(
        {
            "統一編號": "97176009",
            "公司名稱": "範例股份有限公司",
            "資本總額(元)": "3000000",
            "代表人姓名": "王小明",
            "公司所在地": "臺北市",
            "核准設立日期": {"year": 2010, "month": 1, "day": 5},
        }
    )
    assert record.name == "範例股份有限公司"
    assert record.status == transform.STATUS_OPERATING
    assert record.capital == "NT$ 3,000,000"
    assert record.representative == "王小明"
    assert record.founded == "2010/01/05"
    assert record.source == transform.SOURCE_G0V


def test_from_opendata_vip_and_finmind_sources():
    vip = transform.from_opendata_vip({"名稱": "甲公司", "編號": "12345678"})
    assert vip.name == "甲公司"
    assert vip.registration_id == "12345678"
    assert vip.capital == ""
    assert vip.source == transform.SOURCE_OPENDATA_VIP

    finmind = transform.from_finmind({"stock_id": "2330", "stock_name": "台積電", "chairman": "魏哲家"})
    assert finmind.name == "台積電"
    assert finmind.status == transform.STATUS_OPERATING
    assert finmind.source == transform.SOURCE_FINMIND


def test_normalize_records_drops_nameless_rows():
    rows = [
        {"Company_Name": "Acme"},
        {"Company_Name": ""},
        {"Business_Accounting_NO": "12345678"},
        "not a row",
        {"公司名稱": "乙公司"},
    ]

    records = transform.normalize_records(rows, transform.from_gcis)

    assert [r.name for r in records] == ["Acme", "乙公司"]
    assert transform.normalize_records(None, transform.from_gcis) == []
