"""To-do list API: cookie-based JWT sessions over per-user lists and todos."""
