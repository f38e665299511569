import logging
import matrixsolver as ms

logging.basicConfig(level=logging.INFO, format='%(message)s')

# 2x + y = 5, x - y = 1
A = ms.create_matrix('A', 2, 3)
A.fill(['2 1 5', '1 -1 1'])
A.write_to_multiline()

B = A.duplicate('B')
ms.attempt_solution(B)
B.write_to_multiline()
print('solution:', ms.extract_solution(B))

# coefficient part times the solution reproduces the right hand side
coeff = ms.Matrix.from_array('C', A.to_array()[:, :2])
x = ms.Matrix.from_array('x', B.to_array()[:, 2:])
coeff.multiply(x).write_to_multiline()
