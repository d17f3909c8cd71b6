"""`python main.py` で Koch スノーフレークのウィンドウを開く（既定値は `configs/default.yaml`）。"""

from __future__ import annotations

from api.snowflake import main

if __name__ == "__main__":
    main()
