"""Meta-search backend: fans a search term out to video and web search
providers, merges and ranks the results."""
