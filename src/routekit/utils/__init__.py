"""Supporting utilities: logging, delivery input and result export."""
