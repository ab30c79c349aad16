from lfsr_engine.engine import create


if __name__ == "__main__":
    lfsr3 = create(3, 1)

    print(f"Polynomial: {lfsr3.get_polynomial_string()}")
    print(f"Initial state: {lfsr3.get_state_string()}")
    print(f"Max period: {lfsr3.get_max_period()}\n")

    print("Sequence (should be 7 bits before repeating):")
    for i in range(10):
        bit = lfsr3.next_bit()
        print(f"Step {i + 1}: {lfsr3.get_state_string()} -> {int(bit)}")

    print("\nTesting period completion:")
    print(f"Period test: {'PASSED' if lfsr3.self_test() else 'FAILED'}")
