from indexer.lexer import query_terms


def process_results(tf_index, query, limit=10):
    """
    Rank indexed documents against a query

    Args:
        tf_index (dict): Mapping of document path to term frequencies
        query (str): Free-form query text
        limit (int): Maximum number of documents to return

    Returns:
        dict: Query, extracted terms and the ranked documents
    """
    terms = query_terms(query)
    return build_response(query, terms, rank_documents(tf_index, terms, limit))


def rank_documents(tf_index, terms, limit=10):
    """Documents with a non-zero score, best first, ties broken by path"""
    ranked = []

    for path, tf in tf_index.items():
        score = score_document(tf, terms)
        if score <= 0:
            continue
        ranked.append({
            'path': path,
            'score': score,
            'matches': {term: tf[term] for term in terms if tf.get(term)}
        })

    ranked.sort(key=lambda doc: (-doc['score'], doc['path']))
    return ranked[:max(limit, 0)]


def build_response(query, terms, ranked):
    return {
        'query': query,
        'terms': terms,
        'results': ranked,
        'count': len(ranked)
    }


def score_document(tf, terms):
    """Sum of the relative frequencies of the query terms in one document"""
    total = sum(tf.values())
    if total == 0:
        return 0.0
    return sum(tf.get(term, 0) for term in terms) / total
