"""Status components that each turn one argument into a short text value."""