"""Thread-safe: highlight 1000 snippets in parallel from one cached language."""

from concurrent.futures import ThreadPoolExecutor
from functools import partial
from pathlib import Path

from langue import DirectoryLoader, LanguageRegistry, highlight

languages = Path(__file__).resolve().parent.parent / "languages"
registry = LanguageRegistry(loader=DirectoryLoader(languages))

snippets = [f"int x{i} = {i}; /* item {i} */\nif (x{i} > 0) {{ return x{i}; }}" for i in range(1000)]

# First use of "c" compiles once; every other thread waits for that result
with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(partial(highlight, language="c", registry=registry), snippets))

print(f"Highlighted {len(results)} snippets in parallel")
print("Cached languages:", sorted(registry.names))
print(results[0])
