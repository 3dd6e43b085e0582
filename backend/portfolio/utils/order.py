def next_order_index(gateway, table, order_field="order_index"):
    """
    Display position for a row appended after the current last one.
    """
    current = [
        row[order_field]
        for row in gateway.list(table)
        if row.get(order_field) is not None
    ]
    return max(current) + 1 if current else 0
