# indyc/tests/unit/test_request_id_generator.py
'''
Test Suite para RequestIdGenerator:
    Verifica la unicidad y monotonía de los identificadores de correlación.

    Functions::
        test_starts_at_one_and_increments(): 1, 2, 3...
        test_concurrent_callers_get_contiguous_run(): N hilos -> N valores distintos y contiguos.
        test_shared_instance_is_singleton(): Una sola fuente por proceso.
'''

import sys
import os
import threading

# --- AJUSTE DE RUTA PARA EJECUCIÓN DIRECTA ---
current_dir = os.path.dirname(os.path.abspath(__file__))
root_dir = os.path.abspath(os.path.join(current_dir, '../../..'))
if root_dir not in sys.path:
    sys.path.append(root_dir)

from indyc.core.services.request_id_generator import RequestIdGenerator

def test_starts_at_one_and_increments():
    print(">> Ejecutando: test_starts_at_one_and_increments...")

    generator = RequestIdGenerator()

    assert [generator.next_id() for _ in range(3)] == [1, 2, 3]
    assert generator.peek() == 4
    print("[SUCCESS] Secuencia monótona.\n")

def test_custom_start():
    generator = RequestIdGenerator(start=100)
    assert generator.next_id() == 100
    assert generator.next_id() == 101

def test_concurrent_callers_get_contiguous_run():
    print(">> Ejecutando: test_concurrent_callers_get_contiguous_run...")

    generator = RequestIdGenerator()
    threads_count = 8
    calls_per_thread = 500
    results = []
    results_lock = threading.Lock()
    barrier = threading.Barrier(threads_count)

    def worker():
        barrier.wait()
        local = [generator.next_id() for _ in range(calls_per_thread)]
        # Dentro de cada hilo la secuencia también es creciente
        assert local == sorted(local)
        with results_lock:
            results.extend(local)

    threads = [threading.Thread(target=worker) for _ in range(threads_count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    total = threads_count * calls_per_thread
    assert len(set(results)) == total
    assert sorted(results) == list(range(1, total + 1))
    print("[SUCCESS] Sin colisiones bajo concurrencia.\n")

def test_shared_instance_is_singleton():
    print(">> Ejecutando: test_shared_instance_is_singleton...")

    first = RequestIdGenerator.shared()
    second = RequestIdGenerator.shared()

    assert first is second
    a = first.next_id()
    b = second.next_id()
    assert b == a + 1
    print("[SUCCESS] Instancia compartida.\n")

# --- PUNTO DE ENTRADA PARA EJECUCIÓN MANUAL ---
if __name__ == "__main__":
    print("==========================================")
    print("   EJECUTANDO TESTS REQUEST ID (MANUAL)   ")
    print("==========================================\n")

    try:
        test_starts_at_one_and_increments()
        test_custom_start()
        test_concurrent_callers_get_contiguous_run()
        test_shared_instance_is_singleton()

        print("==========================================")
        print("   TODOS LOS TESTS PASARON EXITOSAMENTE   ")
        print("==========================================")
    except AssertionError as e:
        print(f"\nFALLO DE ASERCIÓN: {e}")
