def validate_categories(categories):
    errors = []
    warnings = []

    def find_dupes(ids):
        seen = set()
        dupes = set()
        for x in ids:
            if x in seen:
                dupes.add(x)
            seen.add(x)
        return sorted(dupes)

    cat_ids = [str(c.id) for c in categories]
    dup_cat = find_dupes(cat_ids)
    if dup_cat:
        warnings.append(f"Duplicate category ids: {dup_cat[:10]}" + (" ..." if len(dup_cat) > 10 else ""))

    cat_set = set(cat_ids)

    # parent existence + parent map
    parent_by_id = {}
    for c in categories:
        cid = str(c.id)
        pid = None if c.parent_category_id is None else str(c.parent_category_id)
        parent_by_id[cid] = pid
        if pid and pid not in cat_set:
            warnings.append(f"Category {cid} has parent_category_id={pid} which does not exist")

    # cycle detection in the parent graph
    done = set()
    for start in parent_by_id.keys():
        if start in done:
            continue

        path = []
        pos = {}  # cat_id -> index in path
        cur = start

        while cur:
            if cur in pos:
                cycle = path[pos[cur]:] + [cur]
                errors.append("Category cycle detected: " + " -> ".join(cycle))
                break

            if cur in done:
                break

            pos[cur] = len(path)
            path.append(cur)

            cur = parent_by_id.get(cur)

        done.update(path)

    return errors, warnings
