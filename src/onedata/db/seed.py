"""
onedata.db.seed

Demonstration fixture loaded into an empty store.

Responsibilities:
- Describe a small FI-GL and SD sales lineage (7 nodes, 5 edges, 2 routines).
"""

from __future__ import annotations

from onedata.db.models import EdgeType, NodeType, RoutineType
from onedata.db.records import EdgeRecord, NodeRecord, RoutineRecord

SEED_NODES: tuple[NodeRecord, ...] = (
    NodeRecord("n1", "0FIGL_C01", NodeType.cube, "General Ledger (New)"),
    NodeRecord("n2", "0FIGL_O02", NodeType.adso, "GL Line Items (DSO)"),
    NodeRecord("n3", "0FI_GL_14", NodeType.datasource, "GL Line Items Source"),
    NodeRecord("n4", "ZSALES_HCPR", NodeType.hcpr, "Sales Composite Provider"),
    NodeRecord("n5", "ZSD_O01", NodeType.adso, "Sales Orders DSO"),
    NodeRecord("n6", "2LIS_11_VAHDR", NodeType.datasource, "Sales Order Header"),
    NodeRecord("n7", "2LIS_11_VAITM", NodeType.datasource, "Sales Order Item"),
)

SEED_EDGES: tuple[EdgeRecord, ...] = (
    EdgeRecord("e1", "n2", "n1", EdgeType.transformation),
    EdgeRecord("e2", "n3", "n2", EdgeType.transformation),
    EdgeRecord("e3", "n5", "n4", EdgeType.union),
    EdgeRecord("e4", "n6", "n5", EdgeType.transformation),
    EdgeRecord("e5", "n7", "n5", EdgeType.transformation),
)

_CURRENCY_LOOKUP = """
LOOP AT SOURCE_PACKAGE ASSIGNING <SOURCE_FIELDS>.
  READ TABLE lt_currency INTO ls_curr
    WITH KEY curr_key = <SOURCE_FIELDS>-currency
             valid_date = <SOURCE_FIELDS>-doc_date BINARY SEARCH.
  IF sy-subrc = 0.
    <SOURCE_FIELDS>-amount_usd = <SOURCE_FIELDS>-amount_loc * ls_curr-rate.
  ELSE.
    <SOURCE_FIELDS>-amount_usd = 0.
  ENDIF.
ENDLOOP.
"""

_RETURNS_FILTER = """
LOOP AT SOURCE_PACKAGE ASSIGNING <fs_source>.
  IF <fs_source>-doc_type = 'ZRET'.
    DELETE SOURCE_PACKAGE.
    CONTINUE.
  ENDIF.
  CONCATENATE <fs_source>-sales_org <fs_source>-dist_channel INTO <fs_source>-org_key.
ENDLOOP.
"""

SEED_ROUTINES: tuple[RoutineRecord, ...] = (
    RoutineRecord("r1", "n2", _CURRENCY_LOOKUP, RoutineType.expert),
    RoutineRecord("r2", "n5", _RETURNS_FILTER, RoutineType.start),
)
