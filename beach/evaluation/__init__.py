"""Tree-walking evaluation of Beach programs: results, built-ins, expressions and statements."""