# indyc/tests/unit/test_genesis_loader.py
'''
Test Suite para GenesisLoader:
    Verifica la extracción de validadores desde las transacciones génesis y la
    tolerancia a bloques corruptos.

    Functions::
        test_loads_node_transactions_in_order(): 4 NODE -> 4 validadores en orden.
        test_malformed_entry_is_skipped_and_logged(): 4 válidos + 1 corrupto -> 4 y 1 aviso.
        test_empty_stream(): Sin datos -> lista vacía, sin error.
        test_non_node_transactions_are_ignored(): Otros tipos no son validadores.
        test_indented_genesis_spans_lines(): Objetos con sangría en varias líneas.
'''

import sys
import os
import io
import json
import tempfile
import unittest
from typing import Any, Dict, Union

# --- AJUSTE DE RUTA ---
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.abspath(os.path.join(current_dir, '../../..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from indyc.core.services.genesis_loader import GenesisLoader
from indyc.core.models.validator import Validator
from indyc.core.errors import ConfigurationError

LOGGER_NAME = "indyc.core.services.genesis_loader"

def node_block(alias: str, dest: str, ip: str, port: Union[str, int], txn_type: Any = "0") -> Dict[str, Any]:
    """Bloque génesis con la forma de indy-node."""
    return {
        "reqSignature": {},
        "txn": {
            "data": {
                "data": {
                    "alias": alias,
                    "client_ip": ip,
                    "client_port": port,
                    "node_ip": ip,
                    "node_port": 9701,
                    "services": ["VALIDATOR"],
                },
                "dest": dest,
            },
            "metadata": {"from": "Th7MpTaRZVRYnPiabds81Y"},
            "type": txn_type,
        },
        "txnMetadata": {"seqNo": 1},
        "ver": 1,
    }

def four_nodes():
    return [
        node_block("Node1", "Gw6pDLhcBcoQesN72qfotTgFa7cbuqZpkX3Xo6pLhPhv", "10.0.0.1", "9702"),
        node_block("Node2", "8ECVSk179mjsjKRLWiQtssMLgp6EPhWXtaYyStWPSGAb", "10.0.0.2", 9704),
        node_block("Node3", "DKVxG2fXXTU8yT5N7hGEbXB3dfdAnYv1JczDUHpmDxya", "10.0.0.3", "9706"),
        node_block("Node4", "4PS3EDQ3dW1tci1Bp6543CfuuebjFrg36kLAUcskGfaA", "10.0.0.4", 9708),
    ]

def as_stream(*blocks: Any) -> io.StringIO:
    lines = [b if isinstance(b, str) else json.dumps(b) for b in blocks]
    return io.StringIO("\n".join(lines) + "\n")

class TestGenesisLoader(unittest.TestCase):

    def setUp(self):
        self.loader = GenesisLoader()

    def test_loads_node_transactions_in_order(self):
        print("\n>> Ejecutando: test_loads_node_transactions_in_order...")
        validators = self.loader.load(as_stream(*four_nodes()))

        self.assertEqual([v.alias for v in validators], ["Node1", "Node2", "Node3", "Node4"])
        self.assertEqual(validators[0], Validator(
            alias="Node1",
            verkey="Gw6pDLhcBcoQesN72qfotTgFa7cbuqZpkX3Xo6pLhPhv",
            address="10.0.0.1:9702",
        ))
        # Puerto numérico o en texto: mismo resultado
        self.assertEqual(validators[1].address, "10.0.0.2:9704")
        self.assertEqual(self.loader.skipped, 0)
        print("[SUCCESS] Validadores extraídos en orden.")

    def test_malformed_entry_is_skipped_and_logged(self):
        print(">> Ejecutando: test_malformed_entry_is_skipped_and_logged...")
        nodes = four_nodes()
        stream = as_stream(nodes[0], nodes[1], '{"txn": {"data": ', nodes[2], nodes[3])

        with self.assertLogs(LOGGER_NAME, level="WARNING") as cm:
            validators = self.loader.load(stream)

        self.assertEqual(len(validators), 4)
        self.assertEqual(len(cm.records), 1)
        self.assertEqual(self.loader.skipped, 1)
        print("[SUCCESS] Bloque corrupto omitido sin abortar la carga.")

    def test_node_with_missing_fields_is_skipped(self):
        print(">> Ejecutando: test_node_with_missing_fields_is_skipped...")
        broken = node_block("Broken", "dest", "10.0.0.9", "9702")
        del broken["txn"]["data"]["data"]["alias"]

        bad_port = node_block("BadPort", "dest", "10.0.0.9", "not-a-port")

        with self.assertLogs(LOGGER_NAME, level="WARNING") as cm:
            validators = self.loader.load(as_stream(broken, *four_nodes(), bad_port, "42"))

        self.assertEqual(len(validators), 4)
        self.assertEqual(len(cm.records), 3)

    def test_empty_stream(self):
        print(">> Ejecutando: test_empty_stream...")
        self.assertEqual(self.loader.load(io.StringIO("")), [])
        self.assertEqual(self.loader.load(io.StringIO("\n\n")), [])
        self.assertEqual(self.loader.skipped, 0)

    def test_non_node_transactions_are_ignored(self):
        print(">> Ejecutando: test_non_node_transactions_are_ignored...")
        nym = node_block("Steward", "dest", "10.0.0.9", "9702", txn_type="1")
        integer_type = node_block("Node5", "dest5", "10.0.0.5", "9710", txn_type=0)

        validators = self.loader.load(as_stream(nym, integer_type))

        self.assertEqual([v.alias for v in validators], ["Node5"])
        self.assertEqual(self.loader.skipped, 0)

    def test_binary_and_concatenated_stream(self):
        print(">> Ejecutando: test_binary_and_concatenated_stream...")
        nodes = four_nodes()
        # Dos objetos en la misma línea (flujo sin saltos de línea)
        raw = (json.dumps(nodes[0]) + json.dumps(nodes[1]) + "\n" + json.dumps(nodes[2])).encode("utf-8")

        validators = self.loader.load(io.BytesIO(raw))
        self.assertEqual([v.alias for v in validators], ["Node1", "Node2", "Node3"])

    def test_indented_genesis_spans_lines(self):
        print(">> Ejecutando: test_indented_genesis_spans_lines...")
        nodes = four_nodes()
        stream = io.StringIO(json.dumps(nodes[0], indent=2) + "\n" + json.dumps(nodes[1], indent=2) + "\n")

        validators = self.loader.load(stream)

        self.assertEqual([v.alias for v in validators], ["Node1", "Node2"])
        self.assertEqual(self.loader.skipped, 0)
        print("[SUCCESS] Génesis con sangría cargado completo.")

    def test_broken_indented_block_resumes_at_next_block(self):
        print(">> Ejecutando: test_broken_indented_block_resumes_at_next_block...")
        nodes = four_nodes()
        # Falta la llave de cierre del segundo bloque
        truncated = json.dumps(nodes[1], indent=2).rstrip()[:-1]
        text = "\n".join([json.dumps(nodes[0], indent=2), truncated, json.dumps(nodes[2], indent=2)])

        with self.assertLogs(LOGGER_NAME, level="WARNING") as cm:
            validators = self.loader.load(io.StringIO(text))

        self.assertEqual([v.alias for v in validators], ["Node1", "Node3"])
        self.assertEqual(len(cm.records), 1)
        self.assertEqual(self.loader.skipped, 1)

    def test_non_integral_port_is_skipped(self):
        print(">> Ejecutando: test_non_integral_port_is_skipped...")
        fractional = node_block("Fraction", "dest", "10.0.0.9", 9702.9)
        boolean = node_block("Bool", "dest", "10.0.0.9", True)
        decimal_text = node_block("Text", "dest", "10.0.0.9", "9702.9")

        with self.assertLogs(LOGGER_NAME, level="WARNING") as cm:
            validators = self.loader.load(as_stream(fractional, boolean, decimal_text, four_nodes()[0]))

        self.assertEqual([v.alias for v in validators], ["Node1"])
        self.assertEqual(len(cm.records), 3)
        self.assertEqual(self.loader.skipped, 3)

    def test_ipv6_address_is_bracketed(self):
        validators = self.loader.load(as_stream(node_block("V6", "dest", "::1", "9702")))
        self.assertEqual(validators[0].address, "[::1]:9702")
        self.assertEqual(validators[0].host_port(), ("::1", 9702))

    def test_load_file(self):
        print(">> Ejecutando: test_load_file...")
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "pool.txn")
            with open(path, "w", encoding="utf-8") as f:
                f.write(as_stream(*four_nodes()).getvalue())

            self.assertEqual(len(self.loader.load_file(path)), 4)

            with self.assertRaises(ConfigurationError):
                self.loader.load_file(os.path.join(tmp, "missing.txn"))

if __name__ == "__main__":
    unittest.main()
