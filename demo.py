from comparable import is_between, is_in_range

for value in (1, 2, 9, 10):
    print(f"{value:>4} is_between 1 and 10: {is_between(value, 1, 10)}")
print()

for value in (1, 2, 9, 10):
    print(f"{value:>4} is_in_range 1 and 10: {is_in_range(value, 1, 10)}")
print()
