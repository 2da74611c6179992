from __future__ import annotations

import pytest

from ouivendor.builder import build_from_csv
from ouivendor.lookup import VendorLookup

# Rows taken from the IEEE MA-L registry, in registry order. 080030 is
# registered three times upstream; Apple appears under two OUIs.
REGISTRY_CSV = """\
Registry,Assignment,Organization Name,Organization Address
MA-L,00000F,"NEXT, INC.",3475 DEER CREEK ROAD PALO ALTO CA US 94304
MA-L,0005EE,Vanderbilt International (SWE) AB,Englundavagen 7 Solna  SE 171 41
MA-L,080030,NETWORK RESEARCH CORPORATION,2380 N. ROSE AVENUE OXNARD CA US 93010
MA-L,000000,XEROX CORPORATION,M/S 105-50C WEBSTER NY US 14580
MA-L,00000C,"Cisco Systems, Inc",80 West Tasman Drive San Jose CA US 94568
MA-L,080030,ROYAL MELBOURNE INST OF TECH,GPO BOX 2476V MELBOURNE VIC AU 3001
MA-L,001B63,"Apple, Inc.",1 Infinite Loop Cupertino CA US 95014
MA-L,14CC20,"TP-LINK TECHNOLOGIES CO.,LTD.","BUILDING 7, SECOND PART, HONGHUALING INDUSTRIAL ZONE SHENZHEN GUANGDONG CN 518000"
MA-L,080030,CERN,CH-1211 GENEVE 23 SUISSE/SWITZ CH 1211
MA-L,000D93,Apple,1 Infinite Loop Cupertino CA US 95014
"""


@pytest.fixture
def registry_path(tmp_path):
    """The sample registry written to a temp CSV file."""
    path = tmp_path / "oui.csv"
    path.write_text(REGISTRY_CSV, encoding="utf-8")
    return path


@pytest.fixture
def vendor_table(registry_path):
    return build_from_csv(registry_path)


@pytest.fixture
def lookup(vendor_table):
    return VendorLookup(vendor_table)
