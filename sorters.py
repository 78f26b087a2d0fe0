# ============================================================
# ===================== SORTING ALGORITHMS ===================
# ============================================================
#
# Every algorithm is a generator that mutates `arr` in place and
# yields (arr, [active_indices]) on every compare and every write.
# Draining the generator leaves `arr` sorted.
#
# `arr` can be any mutable sequence with len(), integer indexing and
# item assignment (a list, a 1-D numpy array, ...).

ALGORITHMS = [
    ("Bubble Sort",    "bubble"),
    ("Selection Sort", "selection"),
    ("Insertion Sort", "insertion"),
    ("Quick Sort",     "quick"),
]


def rotate_right(arr, lo, hi):
    """
    Rotate arr[lo..=hi] one step to the right.
    The last element moves to `lo`, everything else shifts up by one.
    """
    if hi <= lo: return
    last = arr[hi]
    for k in range(hi, lo, -1):
        arr[k] = arr[k-1]
        yield arr, [k]
    arr[lo] = last
    yield arr, [lo]


def _search_insert(arr, i):
    # Leftmost position in the sorted prefix arr[0..i) where arr[i] fits,
    # so a new element lands in front of any run of equal ones.
    lo, hi = 0, i
    while lo < hi:
        mid = (lo + hi) // 2
        yield arr, [mid, i]
        if arr[mid] < arr[i]: lo = mid + 1
        else:                 hi = mid
    return lo


def bubble_steps(arr):
    n = len(arr)
    swapped = True
    for i in range(n):
        # [ unsorted | sorted ]
        if not swapped: break
        swapped = False
        for j in range(n - i - 1):
            yield arr, [j, j+1]
            if arr[j] > arr[j+1]:
                arr[j], arr[j+1] = arr[j+1], arr[j]; swapped = True
                yield arr, [j, j+1]


def selection_steps(arr):
    n = len(arr)
    for i in range(n):
        # [ sorted | unsorted ], first minimum wins
        mi = i
        for j in range(i+1, n):
            yield arr, [mi, j]
            if arr[j] < arr[mi]: mi = j
        # rotating instead of swapping keeps the skipped elements in order
        yield from rotate_right(arr, i, mi)


def insertion_steps(arr):
    for i in range(len(arr)):
        # [ sorted | i | unsorted ]
        index = yield from _search_insert(arr, i)
        yield from rotate_right(arr, index, i)


def quick_steps(arr):
    # pending half-open ranges; the left part of a split is popped first
    stack = [(0, len(arr))]
    while stack:
        lo, hi = stack.pop()
        n = hi - lo
        if n < 2: continue
        if n == 2:
            yield arr, [lo, lo+1]
            if arr[lo] > arr[lo+1]:
                arr[lo], arr[lo+1] = arr[lo+1], arr[lo]
                yield arr, [lo, lo+1]
            continue

        # pivot is arr[lo], the remainder is arr[lo+1:hi]
        pivot = arr[lo]
        rest = lo + 1
        left, right = 0, n - 2
        while left <= right:
            yield arr, [rest+left, rest+right]
            if arr[rest+left] <= pivot:
                left += 1
            elif arr[rest+right] > pivot:
                if right == 0: break
                right -= 1
            else:
                arr[rest+left], arr[rest+right] = arr[rest+right], arr[rest+left]
                yield arr, [rest+left, rest+right]
                left += 1
                if right == 0: break
                right -= 1

        # everything in arr[rest:rest+left] is <= pivot
        mid = lo + left
        arr[lo], arr[mid] = arr[mid], arr[lo]
        yield arr, [lo, mid]
        stack.append((mid+1, hi))
        stack.append((lo, mid))


def get_generator(key, arr):
    builtins = {
        "bubble":    lambda: bubble_steps(arr),
        "selection": lambda: selection_steps(arr),
        "insertion": lambda: insertion_steps(arr),
        "quick":     lambda: quick_steps(arr),
    }
    if key in builtins: return builtins[key]()
    raise KeyError(f"Unknown key: {key}")

# ============================================================
# ======================= IN-PLACE API =======================
# ============================================================

def _drain(gen):
    for _ in gen: pass


def bubble_sort(arr):
    """Bubble sort `arr` in place. Stops after the first pass with no swap."""
    _drain(bubble_steps(arr))


def selection_sort(arr):
    """Selection sort `arr` in place, rotating each minimum into position."""
    _drain(selection_steps(arr))


def insertion_sort(arr):
    """Binary insertion sort of `arr` in place."""
    _drain(insertion_steps(arr))


def quick_sort(arr):
    """
    Quick sort `arr` in place, always pivoting on the first element.

    Sorted, reverse-sorted or constant input is the O(n^2) worst case.
    Pending ranges live on an explicit stack, so that shape can reach
    O(n) entries but never hits the recursion limit.
    """
    _drain(quick_steps(arr))


def sort(arr, key="quick"):
    """Sort `arr` in place with the algorithm registered under `key`."""
    _drain(get_generator(key, arr))


def is_sorted(seq) -> bool:
    return all(seq[i] <= seq[i+1] for i in range(len(seq) - 1))
