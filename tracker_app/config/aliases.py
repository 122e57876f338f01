"""
Built-in alias pairs for security names.

Each pair maps a name as it is recorded in the tracking ledger (taken from
the web listing) to the name the broker export uses for the same security.
Pairs are applied in order and a later pair for the same variant replaces
the earlier one, so several entries below deliberately override older
targets (renamed companies, double-spaced broker names).
"""

BUILTIN_ALIAS_PAIRS: tuple[tuple[str, str], ...] = (
    ("Nippon Life AMC", "NIPPON L I A M LTD"),
    ("Ibull Housing Fin", "IBULLS HOUSING FINANCE LTD"),
    ("Au Small Fin Bank", "AU SMALL FINANCE BANK LTD"),
    ("Bajaj Finserv", "BAJAJ FINSERV LTD."),
    ("Bajaj Finance", "BAJAJ FINANCE LIMITED"),
    ("Ceat", "CEAT LIMITED"),
    ("Radico Khaitan", "RADICO KHAITAN LTD"),
    ("Cipla", "CIPLA LTD"),
    ("Karur Vysya Bank", "KARUR VYSYA BANK LTD"),
    ("Aster DM Health", "ASTER DM HEALTHCARE LTD."),
    ("JK Tyre", "JK TYRE & INDUSTRIES LTD"),
    ("Bank of India", "BANK OF INDIA"),
    ("Hindalco", "HINDALCO INDUSTRIES LTD"),
    ("Indian Bank", "INDIAN BANK"),
    ("Bharti Airtel", "BHARTI AIRTEL LIMITED"),
    ("PayTM", "ONE 97 COMMUNICATIONS LTD"),
    ("SBI", "STATE BANK OF INDIA"),  # not SBI Life Insurance
    ("L&T", "LARSEN & TOUBRO LTD"),  # not L&T Finance
    ("HDFC Bank", "HDFC BANK LTD"),
    ("Axis Bank", "AXIS BANK LIMITED"),
    ("ICICI Bank", "ICICI BANK LTD"),
    ("Reliance", "RELIANCE INDUSTRIES LTD"),
    ("TCS", "TATA CONSULTANCY SERV LTD"),
    ("Infosys", "INFOSYS LIMITED"),
    ("Wipro", "WIPRO LIMITED"),
    ("HCL Tech", "HCL TECHNOLOGIES LTD"),
    ("Titan Company", "TITAN COMPANY LIMITED"),
    ("Maruti Suzuki", "MARUTI SUZUKI INDIA LTD."),
    ("Hero MotoCorp", "HERO MOTOCORP LIMITED"),
    ("Tata Consumer", "TATA CONSUMER PRODUCT LTD"),
    ("TVS Motor", "TVS MOTOR COMPANY LTD"),
    ("Apollo Hospital", "APOLLO HOSPITALS ENTER. L"),
    ("Federal Bank", "FEDERAL BANK LTD"),
    ("City Union Bank", "CITY UNION BANK LTD"),
    ("IDFC First Bank", "IDFC FIRST BANK LIMITED"),
    ("PNB", "PUNJAB NATIONAL BANK"),
    ("Shriram Finance", "SHRIRAM FINANCE LIMITED"),
    # Overrides of earlier pairs
    ("Ibull Housing Fin", "SAMMAAN CAPITAL LIMITED"),
    ("Hindalco", "HINDALCO  INDUSTRIES  LTD"),
    ("Aditya Birla Cap.", "ADITYA BIRLA CAPITAL LTD."),
    ("L&T", "LARSEN & TOUBRO LTD."),
    ("Grasim Inds.", "GRASIM INDUSTRIES LTD"),
    ("TVS Motor", "TVS MOTOR COMPANY  LTD"),
    ("SCI", "SHIPPING CORP OF INDIA LT"),
)
