from statekit import create_store

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Creating a store")
print("-" * 100)
print()

counter = create_store({"count": 0, "last_updated": None})
print("Initial state:", counter.get_state())

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Merge updates and replacement updates")
print("-" * 100)
print()

# A mapping is merged into the current state; keys you leave out are kept.
counter.set_state({"last_updated": "now"})
print("After merge:", counter.get_state())

# A function replaces the state with whatever it returns, so spread the previous state
# yourself when you want to keep other keys.
result = counter.set_state(lambda prev: {**prev, "count": prev["count"] + 1})
print("After function update:", counter.get_state())
print("Changes:", [change.to_dict() for change in result.changes])

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Subscribing")
print("-" * 100)
print()

unsubscribe = counter.subscribe(lambda state: print("State changed:", state))

for _ in range(3):
    counter.set_state(lambda prev: {**prev, "count": prev["count"] + 1})

# After this, no more "State changed" lines.
unsubscribe()
counter.set_state({"count": 100})

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Undo, redo and reset")
print("-" * 100)
print()

counter.undo()
print("After undo:", counter.select("count"))
counter.redo()
print("After redo:", counter.select("count"))
counter.reset()
print("After reset:", counter.select("count"))

# ------------------------------------------------------------------------------------------------

print()
print("=" * 100)
print("Paths and watchers")
print("-" * 100)
print()

settings = create_store({"settings": {"theme": "light", "language": "en"}})

settings.watch_value(
    "settings.theme",
    lambda current, previous: print(f"Theme changed: {previous} -> {current}"),
)

settings.patch("settings.language", "tr")  # Watcher stays silent
settings.patch("settings.theme", "dark")  # Prints "Theme changed: light -> dark"
print("Settings:", settings.select("settings"))
