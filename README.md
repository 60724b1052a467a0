# reveltools

A small toolbox of containers, thread-based concurrency helpers and
probability distributions. It uses only the standard library.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Collections

### Priority queue (`reveltools.heap`)

`PriorityQueue(heap_type)` hands items out in priority order. Note how the
two `HeapType` members order items:

- `HeapType.MAX_HEAP` (the default) gives the **smallest** item first.
- `HeapType.MIN_HEAP` gives the **greatest** item first.

```python
from reveltools.heap import HeapType, PriorityQueue

pq = PriorityQueue(HeapType.MAX_HEAP)
for n in (5, 1, 3):
    pq.enqueue(n)
pq.dequeue()           # 1
len(pq)                # 2
```

`dequeue` on an empty queue raises `IndexError`. Passing anything other
than a `HeapType` raises `TypeError`.

### Stack and queue (`reveltools.stack_queue`)

```python
from reveltools.stack_queue import Stack, Queue

stack = Stack(1, 2, 3)
stack.push(4)
stack.peek()           # 4
list(stack.drain())    # [4, 3, 2, 1], and the stack is left empty

queue = Queue(1, 2, 3)
queue.dequeue()               # 1
list(queue.drain_indexed())   # [(0, 2), (1, 3)]
```

`drain` and `drain_indexed` remove the items as they yield them.
`pop`, `peek` and `dequeue` raise `IndexError` on an empty container.

### JSON-serialisable set (`reveltools.jsonset`)

```python
from reveltools.jsonset import Set, dumps, loads

s = Set([1, 2, 2, 3])
len(s)                 # 3
2 in s, s.has(4)       # (True, False)
s.to_json()            # "[1,2,3]"
Set.from_json("[4,4,5]").has(5)   # True
loads("null")          # None
dumps(None)            # "null"

s.load_json("[7,8]")   # replaces the contents
s.load_json("null")    # empties the set
```

`Set` also has `add`, `discard`, `union`, `intersection`, iteration and
`enumerate()`, which yields `(index, value)` pairs. `from_json`,
`load_json` and `loads` raise `ValueError` when the JSON is not an array
(message `Set: expected JSON array`) or is not valid JSON.

### Iteration (`reveltools.iterutils`)

```python
from reveltools.iterutils import zip_pairs

list(zip_pairs([1, 2, 3], "ab"))  # [(1, "a"), (2, "b")]
```

## Concurrency

- `reveltools.blocking.BlockingQueue(queue=None, buffer=0)` and
  `BlockingStack(stack=None, buffer=0)` make a `Queue` or `Stack` (a new
  one by default) safe to share between threads. `buffer` is the most items
  they hold, and `0` means no limit; a negative buffer raises `ValueError`.
  `enqueue`/`push` wait for room, and do nothing once the container is
  closed. `dequeue`/`pop` wait for an item and raise `ClosedError` once the
  container is closed and empty. `try_dequeue`/`try_pop` raise `EmptyError`
  instead of waiting. `close()` wakes every waiting thread.
- `reveltools.barrier.Barrier` makes threads wait for each other. Each
  thread calls `lock()` to register, and `unlock()` blocks until every
  registered thread has called `unlock()`. `unlock()` without a matching
  `lock()` raises `RuntimeError`; `pending` gives the number still to
  arrive.
- `reveltools.rate_limiter.RateLimiter(rate, per)` is a token bucket. `per`
  is seconds or a `datetime.timedelta`. It starts with `rate` tokens and adds
  one every `per / rate` seconds, up to `rate`. `allow()` takes a token
  without waiting and returns whether it got one. `wait(timeout=None)`
  blocks for a token and raises `TimeoutError` if none comes in time.
  `stop()` ends the refill; stopping twice raises `RuntimeError`.
- `reveltools.worker_pool.WorkerPool(workers, queue_size)` runs submitted
  callables on worker threads. Up to `queue_size` jobs wait for a worker;
  with `0`, `submit` returns only once a worker has taken the job. Call
  `close()`, then `wait()`, which returns the exceptions the jobs raised.
  Submitting after `close()` raises `RuntimeError`.

```python
from reveltools.worker_pool import WorkerPool

pool = WorkerPool(4, 16)
for i in range(10):
    pool.submit(lambda i=i: None if i % 2 else 1 / 0)
pool.close()
errors = pool.wait()   # five ZeroDivisionError instances
```

## Distributions

`reveltools.distributions` provides `NormalDist(mu=0.0, sigma=1.0)`,
`ExpDist(lam)`, `Chi2Dist(k)`, `BinomDist(n, p)` and `PoissonDist(lam)`,
all subclasses of `Distribution`. Each has `rand()`, `pdf(x)` and `cdf(x)`.
Invalid parameters give `nan` rather than an exception (except
`ExpDist.rand`, which does not check its rate). `pdf` of the binomial and
Poisson distributions is zero at non-integer points.

```python
from reveltools.distributions import NormalDist, PoissonDist

NormalDist(0.0, 1.0).cdf(0.0)   # 0.5
PoissonDist(3.0).pdf(2)         # about 0.224
```

The module also exposes the samplers it builds on: `gamma_rand(shape)`
(Marsaglia-Tsang) and `poisson_ptrs(lam)` (transformed rejection).
Sampling uses the `random` module, so `random.seed` makes it repeatable.

`reveltools.special` holds the special functions behind the
distributions: `log_gamma`, `log_factorial`, `log_choose` and
`reg_lower_gamma`.

## What it does not do

The package is a library only; it installs no command-line program.