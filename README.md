# dslists

Integer data structures: a singly linked list with a set of classic list
algorithms, a doubly linked list, a stack and a queue. Each structure is
created holding one value.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Singly linked list

`dslists.linkedlist` provides `Node` (with `data` and `next`) and
`LinkedList`.

```python
from dslists.linkedlist import LinkedList

ll = LinkedList(3)
for value in (14, 5, 28, 28, 35):
    ll.append(value)
ll.prepend(50)

print(ll)              # {50, 3, 14, 5, 28, 28, 35}
print(len(ll))         # 7
ll.partition_list(10)  # values below 10 first, relative order kept
ll.remove_duplicates() # keeps the first node of each value
ll.reverse()
ll.swap_pairs()
ll.reverse_between(1, 3)
print(list(ll))
```

What the list offers:

- `append`, `prepend`, `insert(index, value)` (index from 0 to `len`
  inclusive; `IndexError` otherwise).
- `get(index)` returns the `Node`; `set(index, value)` replaces its value.
  Both raise `IndexError` for an index out of range.
- `delete_first`, `delete_last` and `delete_node(index)`; these do nothing
  on an empty list or an index out of range.
- `reverse`, `reverse_between(m, n)` (inclusive indices; `IndexError` for
  an invalid range), `swap_pairs`, `partition_list(limit)` and
  `remove_duplicates`.
- `find_middle_node()` (the second of the two middle nodes for even
  lengths, `None` when empty), `has_loop()`, and `find_kth_from_end(k)`,
  which raises `ValueError` for `k < 1` and `IndexError` when `k` exceeds
  the length.
- `binary_to_decimal()` reads the values, head first, as binary digits.
- `head` and `tail` give the end nodes (`None` when empty); `len()`,
  iteration over values and `str()` (`{a, b, c}`) are supported, and
  `display()` prints that form followed by a newline.
- `copy.copy(ll)` gives an independent copy; `take()` moves the nodes into
  a new list and leaves this one empty; `clear()` empties the list.
- `load(text)` replaces the contents with the integers read from the start
  of `text`, stopping at the first token that does not begin with an
  integer.

## Doubly linked list

`dslists.doublylinkedlist` provides `DNode` (with `value`, `next`, `prev`
and a `data` alias) and `DoublyLinkedList`.

```python
from dslists.doublylinkedlist import DoublyLinkedList

dll = DoublyLinkedList(10)
dll.append(20)
dll.insert_node(1, 15)
dll.display()          # prints {10, 15, 20}
```

It has `append`, `prepend`, `delete_first`, `delete_last`,
`delete_node(index)` (ignores an index out of range), `get(index)` and
`set(index, value)` (both raise `IndexError` out of range),
`insert_node(index, value)` (index from 0 to `len`), `clear`, `head`,
`tail`, `len()`, iteration and `str()`. `get` walks from whichever end is
closer to the index.

## Stack and queue

```python
from dslists.stack import Stack
from dslists.queue import Queue

s = Stack(42)
s.push(1)
s.peek()               # 1
s.pop()                # 1
s.height               # 1

q = Queue(10)
q.enqueue(20)
q.dequeue()            # 10
q.size                 # 1
```

`Stack` iterates and prints from top to bottom; `Queue` from front to back.
`pop`, `dequeue` and `peek` on an empty structure raise `IndexError`. Both
have `clear`, `display`, `len()` and `str()`.

## Demo

A short demonstration fills a queue with 10 to 90 and then drains it,
printing the queue after each step:

```
dslists-demo
```