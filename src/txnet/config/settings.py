import os
from dotenv import load_dotenv
load_dotenv()
# ---- Edge list input ----
EDGELIST_PATH = os.environ.get("TXNET_EDGELIST_PATH", "data/txs_edgelist.csv")
SOURCE_COLUMN = os.environ.get("TXNET_SOURCE_COLUMN", "txId1")
TARGET_COLUMN = os.environ.get("TXNET_TARGET_COLUMN", "txId2")
CSV_CHUNK_SIZE = int(os.environ.get("TXNET_CSV_CHUNK_SIZE", "100000"))

# ---- Analysis ----
TOP_K = int(os.environ.get("TXNET_TOP_K", "10"))
SAMPLE_SIZE = int(os.environ.get("TXNET_SAMPLE_SIZE", "1000"))

# Unset = fresh randomness every run
_seed = os.environ.get("TXNET_RANDOM_SEED")
RANDOM_SEED = int(_seed) if _seed else None

# ----- Outputs ------
OUTPUT_DIR = os.environ.get("TXNET_OUTPUT_DIR", "out")

# degree histogram only shows degrees up to this bound
PLOT_MAX_DEGREE = int(os.environ.get("TXNET_PLOT_MAX_DEGREE", "50"))
