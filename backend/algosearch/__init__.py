"""AlgoSearch: unified, filterable, paginated coding-problem search results."""
