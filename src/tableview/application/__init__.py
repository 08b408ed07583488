"""Application – the view pipeline stages and the state that drives them."""
