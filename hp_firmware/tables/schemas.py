"""
Table schemas for the HPE management MIBs.

CPQIDA-MIB (array controllers, logical and physical drives) and CPQSM2-MIB
(Integrated Lights-Out). Schemas are static and built once at import time.
"""

from .snmp_table import ColumnDefinition, TableSchema

# ============================================================================
# CPQIDA-MIB - Array Controller Table
# ============================================================================

CPQ_DA_CNTLR_ENTRY = ".1.3.6.1.4.1.232.3.2.2.1.1"

CONTROLLER_MODELS = {
    "1": "other",
    "74": "p440",
    "75": "p440ar",
    "76": "p441",
    "77": "p741m",
    "78": "p840",
    "79": "p841",
    "80": "h240ar",
    "81": "h244br",
    "82": "h240",
    "83": "h241",
    "84": "b140i",
    "85": "sh-generic",
    "86": "p240nr",
    "87": "h240nr",
    "88": "p840ar",
    "89": "p542d",
    "90": "s100i",
    "91": "e208i-p",
    "92": "e208i-a",
    "93": "e208i-c",
    "94": "e208e-p",
    "95": "p204i-b",
    "96": "p204i-c",
    "97": "p408i-p",
    "98": "p408i-a",
    "99": "p408e-p",
    "100": "p408i-c",
    "101": "p408e-m",
    "102": "p416ie-m",
    "103": "p816i-a",
}

CONTROLLER_CONDITIONS = {
    "1": "other",
    "2": "ok",
    "3": "degraded",
    "4": "failed",
}

CONTROLLER_SCHEMA = TableSchema(
    name="cpqDaCntlrTable",
    oid=CPQ_DA_CNTLR_ENTRY,
    columns=(
        ColumnDefinition("index", f"{CPQ_DA_CNTLR_ENTRY}.1"),
        ColumnDefinition("model", f"{CPQ_DA_CNTLR_ENTRY}.2", CONTROLLER_MODELS),
        ColumnDefinition("firmware", f"{CPQ_DA_CNTLR_ENTRY}.3"),
        ColumnDefinition("condition", f"{CPQ_DA_CNTLR_ENTRY}.6", CONTROLLER_CONDITIONS),
        ColumnDefinition("serial", f"{CPQ_DA_CNTLR_ENTRY}.15"),
        ColumnDefinition("location", f"{CPQ_DA_CNTLR_ENTRY}.20"),
    )
)

# ============================================================================
# CPQIDA-MIB - Logical Drive Table
# ============================================================================

CPQ_DA_LOG_DRV_ENTRY = ".1.3.6.1.4.1.232.3.2.3.1.1"

# cpqDaLogDrvFaultTol -> RAID level
RAID_TYPES = {
    "2": "0",
    "3": "1",
    "4": "4",
    "5": "5",
    "7": "6",
    "8": "50",
    "9": "60",
    "10": "1ADM",
    "11": "10ADM",
}

LOGICAL_DRIVE_STATUSES = {
    "1": "other",
    "2": "ok",
    "3": "failed",
    "4": "unconfigured",
    "5": "recovering",
    "6": "readyForRebuild",
    "7": "rebuilding",
    "8": "wrongDrive",
    "9": "badConnect",
    "10": "overheating",
    "11": "shutdown",
    "12": "expanding",
    "13": "notAvailable",
    "14": "queuedForExpansion",
}

LOGICAL_DRIVE_SCHEMA = TableSchema(
    name="cpqDaLogDrvTable",
    oid=CPQ_DA_LOG_DRV_ENTRY,
    columns=(
        ColumnDefinition("controller_index", f"{CPQ_DA_LOG_DRV_ENTRY}.1"),
        ColumnDefinition("index", f"{CPQ_DA_LOG_DRV_ENTRY}.2"),
        ColumnDefinition("fault_tolerance", f"{CPQ_DA_LOG_DRV_ENTRY}.3", RAID_TYPES),
        ColumnDefinition("status", f"{CPQ_DA_LOG_DRV_ENTRY}.4", LOGICAL_DRIVE_STATUSES),
    )
)

# ============================================================================
# CPQIDA-MIB - Physical Drive Table
# ============================================================================

CPQ_DA_PHY_DRV_ENTRY = ".1.3.6.1.4.1.232.3.2.5.1.1"

DRIVE_STATUSES = {
    "1": "other",
    "2": "ok",
    "3": "failed",
    "4": "predictiveFailure",
    "5": "erasing",
    "6": "eraseDone",
    "7": "eraseQueued",
    "8": "ssdWearOut",
    "9": "notAuthenticated",
}

DRIVE_SCHEMA = TableSchema(
    name="cpqDaPhyDrvTable",
    oid=CPQ_DA_PHY_DRV_ENTRY,
    columns=(
        ColumnDefinition("controller_index", f"{CPQ_DA_PHY_DRV_ENTRY}.1"),
        ColumnDefinition("index", f"{CPQ_DA_PHY_DRV_ENTRY}.2"),
        ColumnDefinition("model", f"{CPQ_DA_PHY_DRV_ENTRY}.3"),
        ColumnDefinition("firmware", f"{CPQ_DA_PHY_DRV_ENTRY}.4"),
        ColumnDefinition("status", f"{CPQ_DA_PHY_DRV_ENTRY}.6", DRIVE_STATUSES),
        ColumnDefinition("hours", f"{CPQ_DA_PHY_DRV_ENTRY}.9"),
        ColumnDefinition("serial", f"{CPQ_DA_PHY_DRV_ENTRY}.51"),
        ColumnDefinition("location", f"{CPQ_DA_PHY_DRV_ENTRY}.64"),
    )
)

# ============================================================================
# CPQSM2-MIB - Integrated Lights-Out (scalars, row index '0')
# ============================================================================

CPQ_SM2_CNTLR = ".1.3.6.1.4.1.232.9.2.2"

ILO_MODELS = {
    "9": "ilo3",
    "10": "ilo4",
    "11": "ilo5",
    "12": "ilo6",
}

ILO_SCHEMA = TableSchema(
    name="cpqSm2Cntlr",
    oid=CPQ_SM2_CNTLR,
    columns=(
        ColumnDefinition("firmware", f"{CPQ_SM2_CNTLR}.2"),
        ColumnDefinition("model", f"{CPQ_SM2_CNTLR}.21", ILO_MODELS),
    )
)
