"""
Geração de identificadores no formato `<prefixo>_<epoch ms>_<sufixo>`
"""

import time
import uuid


def gerar_id(prefixo: str) -> str:
    """Gerar ID único, ex.: appointment_1718000000000_3f9a2c1b7"""
    return f"{prefixo}_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"
